"""Descriptive statistics and solving linear systems by Gaussian elimination."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _require_values(values: Sequence[float]) -> list[float]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean of ``values``."""
    items = _require_values(values)
    return sum(items) / len(items)


def variance(values: Sequence[float]) -> float:
    """Return the population variance of ``values``."""
    items = _require_values(values)
    centre = mean(items)
    return sum((v - centre) ** 2 for v in items) / len(items)


def standard_deviation(values: Sequence[float]) -> float:
    """Return the population standard deviation of ``values``."""
    return math.sqrt(variance(values))


def quartiles(values: Sequence[float]) -> tuple[float, float]:
    """Return the first and third quartiles of ``values``.

    They are the sorted elements at positions ``n // 4`` and ``3 * n // 4``.
    """
    items = sorted(_require_values(values))
    n = len(items)
    return items[n // 4], items[(3 * n) // 4]


def interquartile_range(values: Sequence[float]) -> float:
    """Return the third quartile minus the first."""
    q1, q3 = quartiles(values)
    return q3 - q1


def gauss_elimination(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve a linear system given as an ``n`` by ``n + 1`` augmented matrix.

    Rows are swapped so the largest pivot in each column is used. Raises
    ValueError for a malformed matrix or a singular system.
    """
    rows = [[float(v) for v in row] for row in augmented]
    n = len(rows)
    if n == 0 or any(len(row) != n + 1 for row in rows):
        raise ValueError("expected an n by n+1 augmented matrix")

    for i in range(n):
        pivot_row = max(range(i, n), key=lambda r: abs(rows[r][i]))
        rows[i], rows[pivot_row] = rows[pivot_row], rows[i]
        pivot = rows[i]
        if pivot[i] == 0:
            raise ValueError("the system is singular")
        for below in rows[i + 1 :]:
            factor = below[i] / pivot[i]
            below[i:] = [b - factor * p for b, p in zip(below[i:], pivot[i:])]

    solution = [0.0] * n
    for i in reversed(range(n)):
        row = rows[i]
        known = sum(c * s for c, s in zip(row[i + 1 : n], solution[i + 1 :]))
        solution[i] = (row[n] - known) / row[i]
    return solution