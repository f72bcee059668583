"""Subsequences and permutations of sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def longest_subsequence(values: Iterable[int]) -> list[int]:
    """Return a longest non-decreasing subsequence of ``values``.

    The first element is taken as a pivot; every smaller later element is tried
    as a new start, and the pivot itself is tried last. Ties keep the earlier
    candidate.
    """
    items = list(values)
    if len(items) <= 1:
        return items
    pivot, rest = items[0], items[1:]
    best: list[int] = []
    for position, value in enumerate(rest):
        if value < pivot:
            tail = longest_subsequence(w for w in rest[position + 1 :] if w >= value)
            if len(tail) + 1 > len(best):
                best = [value, *tail]
    tail = longest_subsequence(w for w in rest if w >= pivot)
    if len(tail) + 1 > len(best):
        best = [pivot, *tail]
    return best


def sorted_permutations(text: str) -> Iterator[str]:
    """Yield every distinct permutation of ``text`` in lexicographic order."""
    chars = sorted(text)
    size = len(chars)
    while True:
        yield "".join(chars)
        i = size - 2
        while i >= 0 and chars[i] >= chars[i + 1]:
            i -= 1
        if i < 0:
            return
        j = min(
            (k for k in range(i + 1, size) if chars[k] > chars[i]),
            key=lambda k: chars[k],
        )
        chars[i], chars[j] = chars[j], chars[i]
        chars[i + 1 :] = sorted(chars[i + 1 :])