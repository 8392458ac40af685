"""Readable implementations of classic data structures and algorithms."""

__version__ = "0.1.0"

__all__ = [
    "fifo",
    "graph",
    "hash_map",
    "math_utils",
    "operators",
    "pointer",
    "search",
    "stack",
    "strings",
    "tree",
]