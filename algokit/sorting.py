"""Classic comparison and counting sorts.

Every sort takes any iterable of mutually comparable values and returns a new
sorted list in ascending order. The input is never modified.
"""

from __future__ import annotations

import bisect
import random
from collections.abc import Iterable, Sequence
from typing import Any


def is_sorted(values: Sequence[Any]) -> bool:
    """Return whether ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def _shuffle(items: list[Any], rng: random.Random) -> None:
    n = len(items)
    for i in range(n):
        r = rng.randrange(n)
        items[i], items[r] = items[r], items[i]


def bogo_sort(values: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Shuffle the values with ``rng`` until they happen to be sorted."""
    items = list(values)
    if rng is None:
        rng = random.Random()
    while not is_sorted(items):
        _shuffle(items, rng)
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Swap adjacent out-of-order pairs until a full pass makes no swap."""
    items = list(values)
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(items) - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
    return items


def _sift_down(items: list[Any], index: int, size: int) -> None:
    parent, child = index, 2 * index + 1
    while child < size:
        if child + 1 < size and items[child + 1] > items[child]:
            child += 1
        if items[parent] >= items[child]:
            break
        items[parent], items[child] = items[child], items[parent]
        parent, child = child, 2 * child + 1


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Build a max-heap, then move its root to the end repeatedly."""
    items = list(values)
    n = len(items)
    for i in reversed(range(n // 2)):
        _sift_down(items, i, n)
    for end in reversed(range(1, n)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Move each element left past every larger element before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _partition(items: list[Any], lower: int, upper: int) -> int:
    pivot = items[upper]
    i = lower - 1
    for j in range(lower, upper):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[upper] = items[upper], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Partition around the last element of each range and sort both sides."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lower, upper = pending.pop()
        if upper > lower:
            split = _partition(items, lower, upper)
            pending.append((lower, split - 1))
            pending.append((split + 1, upper))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Swap each position with the smallest value found at or after it."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def binary_insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort that finds each insertion point by binary search."""
    items: list[Any] = []
    for value in values:
        items.insert(bisect.bisect_right(items, value), value)
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting how often each one occurs."""
    items = list(values)
    if not items:
        return []
    if any(v < 0 for v in items):
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for v in items:
        counts[v] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort each half recursively and merge the two sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def shaker_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that passes forwards and backwards alternately."""
    items = list(values)
    n = len(items)
    for p in range(1, n // 2 + 1):
        for i in range(p - 1, n - p):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
        for i in range(n - p - 1, p - 1, -1):
            if items[i] < items[i - 1]:
                items[i], items[i - 1] = items[i - 1], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort over gaps that halve down to one."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for j in range(gap, n):
            k = j - gap
            while k >= 0 and items[k + gap] < items[k]:
                items[k], items[k + gap] = items[k + gap], items[k]
                k -= gap
        gap //= 2
    return items


def exchange_sort(values: Iterable[Any]) -> list[Any]:
    """Compare each position with every later one, swapping when out of order."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(i + 1, n):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items