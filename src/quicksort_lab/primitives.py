from __future__ import annotations

import operator
from typing import Any, Callable, MutableSequence, Optional, Tuple

KeyFunc = Optional[Callable[[Any], Any]]


def swap(seq: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange seq[i] and seq[j] in place."""
    seq[i], seq[j] = seq[j], seq[i]


def partition(seq: MutableSequence[Any], low: int, high: int, *, key: KeyFunc = None) -> int:
    """Lomuto partition of seq[low..high] (inclusive) around seq[high].

    After the call every element at or before the returned index is <= pivot,
    every element after it is > pivot, and the pivot sits at the returned index.
    Equal elements may be reordered. Performs exactly high - low comparisons.

    Bounds are not checked here: callers go through resolve_bounds first.
    """
    i = low - 1
    if key is None:
        pivot = seq[high]
        for j in range(low, high):
            if seq[j] <= pivot:
                i += 1
                swap(seq, i, j)
    else:
        pivot_key = key(seq[high])
        for j in range(low, high):
            if key(seq[j]) <= pivot_key:
                i += 1
                swap(seq, i, j)
    swap(seq, i + 1, high)
    return i + 1


def resolve_bounds(seq: MutableSequence[Any], low: int, high: Optional[int]) -> Tuple[int, int]:
    """Resolve the default upper bound and fail fast on invalid ranges.

    low > high is an empty range and is returned untouched. Otherwise both
    bounds must lie inside the sequence; they are never clamped or wrapped.
    """
    n = len(seq)
    low = operator.index(low)
    high = n - 1 if high is None else operator.index(high)
    if low > high:
        return low, high
    if low < 0:
        raise IndexError(f"low bound {low} is negative")
    if high >= n:
        raise IndexError(f"high bound {high} out of range for sequence of length {n}")
    return low, high
