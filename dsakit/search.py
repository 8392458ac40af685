"""Binary searches for the bounds of a value in a sorted sequence."""

from __future__ import annotations

from typing import Any, Sequence


def lower_bound(seq: Sequence[Any], value: Any) -> int:
    """Return the index of the first element not less than value, or len(seq)."""
    first, last = 0, len(seq)
    while first != last:
        middle = first + (last - first) // 2
        if seq[middle] < value:
            first = middle + 1
        else:
            last = middle
    return first


def upper_bound(seq: Sequence[Any], value: Any) -> int:
    """Return the index of the first element greater than value, or len(seq)."""
    first, last = 0, len(seq)
    while first != last:
        middle = first + (last - first) // 2
        if seq[middle] <= value:
            first = middle + 1
        else:
            last = middle
    return first