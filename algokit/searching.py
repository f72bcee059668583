"""Searching in sequences and sorted matrices, and selection of order statistics."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence


def binary_search(arr: Sequence[int], x: int) -> int | None:
    """Return an index of ``x`` in the sorted ``arr``, or None if it is absent.

    The search halves the range recursively.
    """

    def search(low: int, high: int) -> int | None:
        if high < low:
            return None
        mid = low + (high - low) // 2
        if arr[mid] == x:
            return mid
        if arr[mid] > x:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(arr) - 1)


def iterative_binary_search(arr: Sequence[int], x: int) -> int | None:
    """Return an index of ``x`` in the sorted ``arr``, or None if it is absent.

    The loop runs at most ``len(arr)`` times.
    """
    left, right = 0, len(arr) - 1
    for _ in range(len(arr)):
        if left > right:
            break
        pos = (left + right) // 2
        if arr[pos] == x:
            return pos
        if arr[pos] < x:
            left = pos + 1
        else:
            right = pos - 1
    return None


def jump_search(arr: Sequence[int], x: int) -> int | None:
    """Return an index of ``x`` in the sorted ``arr`` using square-root jumps."""
    n = len(arr)
    if n == 0:
        return None
    block = math.isqrt(n)
    step, prev = block, 0
    while arr[min(step, n) - 1] < x:
        prev = step
        step += block
        if prev >= n:
            return None
    while arr[prev] < x:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if arr[prev] == x else None


def linear_search(arr: Sequence[int], value: int) -> bool:
    """Return whether ``value`` occurs in ``arr``."""
    return any(item == value for item in arr)


def fibonacci_search(arr: Sequence[int], x: int) -> int | None:
    """Return an index of ``x`` in the sorted ``arr`` using Fibonacci steps."""
    n = len(arr)
    if n == 0:
        return None
    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < n:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, n - 1)
        if arr[i] < x:
            fib_m = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif arr[i] > x:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < n and arr[offset + 1] == x:
        return offset + 1
    return None


def interpolation_search(arr: Sequence[int], x: int) -> int | None:
    """Return the index of the first occurrence of ``x`` in ``arr``, or None."""
    return next((i for i, item in enumerate(arr) if item == x), None)


def _row_search(
    matrix: Sequence[Sequence[int]], row: int, low: int, high: int, x: int
) -> tuple[int, int] | None:
    while low <= high:
        mid = (low + high) // 2
        value = matrix[row][mid]
        if value == x:
            return row, mid
        if value > x:
            high = mid - 1
        else:
            low = mid + 1
    return None


def matrix_search(matrix: Sequence[Sequence[int]], x: int) -> tuple[int, int] | None:
    """Return the ``(row, column)`` of ``x`` in a row-major sorted matrix, or None.

    Every row is sorted and each row starts above the end of the one before.
    """
    n = len(matrix)
    if n == 0 or not matrix[0]:
        return None
    m = len(matrix[0])
    if n == 1:
        return _row_search(matrix, 0, 0, m - 1, x)

    i_low, i_high, j_mid = 0, n - 1, m // 2
    while i_low + 1 < i_high:
        i_mid = (i_low + i_high) // 2
        value = matrix[i_mid][j_mid]
        if value == x:
            return i_mid, j_mid
        if value > x:
            i_high = i_mid
        else:
            i_low = i_mid

    first, second = matrix[i_low], matrix[i_low + 1]
    if first[j_mid] == x:
        return i_low, j_mid
    if second[j_mid] == x:
        return i_low + 1, j_mid
    if j_mid > 0 and x <= first[j_mid - 1]:
        return _row_search(matrix, i_low, 0, j_mid - 1, x)
    if j_mid + 1 < m and first[j_mid + 1] <= x <= first[m - 1]:
        return _row_search(matrix, i_low, j_mid + 1, m - 1, x)
    if j_mid > 0 and x <= second[j_mid - 1]:
        return _row_search(matrix, i_low + 1, 0, j_mid - 1, x)
    return _row_search(matrix, i_low + 1, j_mid + 1, m - 1, x)


def random_select(
    values: Sequence[int], k: int, rng: random.Random | None = None
) -> int:
    """Return the element that would sit at index ``k`` once ``values`` is sorted.

    Pivots are chosen at random from ``rng``.
    """
    items = list(values)
    if not 0 <= k < len(items):
        raise IndexError(f"rank {k} out of range for {len(items)} values")
    if rng is None:
        rng = random.Random()
    while True:
        pivot = rng.choice(items)
        lower = [v for v in items if v < pivot]
        higher = [v for v in items if v > pivot]
        equal = len(items) - len(lower) - len(higher)
        if k < len(lower):
            items = lower
        elif k < len(lower) + equal:
            return pivot
        else:
            k -= len(lower) + equal
            items = higher