"""Classic algorithms: hashing, base conversions, number puzzles, searching, sorting, shortest paths, a binary search tree, statistics and text utilities."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "bucket_sort",
    "conversions",
    "graphs",
    "hashing",
    "numbers",
    "searching",
    "sequences",
    "sorting",
    "statistics",
    "text",
]