"""Bucket sort over integers grouped into fixed-width buckets."""

from __future__ import annotations

import bisect
from collections.abc import Iterable

BUCKET_COUNT = 5
INTERVAL = 10


def bucket_index(value: int, interval: int = INTERVAL) -> int:
    """Return the bucket of ``value``: its quotient by ``interval``, truncated toward zero."""
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    quotient = abs(value) // interval
    return quotient if value >= 0 else -quotient


def bucket_sort(
    values: Iterable[int],
    bucket_count: int = BUCKET_COUNT,
    interval: int = INTERVAL,
) -> list[int]:
    """Return the values sorted by distributing them into buckets.

    Each value goes to bucket ``bucket_index(value, interval)``, each bucket
    is kept in order by insertion, and the buckets are read out in turn.
    Raises ValueError when a value falls outside the available buckets.
    """
    if bucket_count <= 0:
        raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in values:
        position = bucket_index(value, interval)
        if not 0 <= position < bucket_count:
            raise ValueError(
                f"value {value} belongs to bucket {position}, "
                f"outside the {bucket_count} available"
            )
        bisect.insort_right(buckets[position], value)
    return [value for bucket in buckets for value in bucket]