from __future__ import annotations

from typing import Any, MutableSequence, Optional, TypeVar

from .primitives import KeyFunc, partition, resolve_bounds

S = TypeVar("S", bound=MutableSequence[Any])


def _sort_range(seq: MutableSequence[Any], low: int, high: int, key: KeyFunc) -> None:
    # Recurse into the smaller side, loop on the larger one: stack depth stays
    # O(log n) while the comparison count is the same as the naive recursion.
    while low < high:
        p = partition(seq, low, high, key=key)
        if p - low < high - p:
            _sort_range(seq, low, p - 1, key)
            low = p + 1
        else:
            _sort_range(seq, p + 1, high, key)
            high = p - 1


def quicksort(seq: S, low: int = 0, high: Optional[int] = None, *, key: KeyFunc = None) -> S:
    """Sort seq[low..high] ascending in place and return seq itself.

    Lomuto partitioning with the last element of each range as pivot.
    Average cost is O(n log n) comparisons. Already ascending, descending or
    all-equal inputs always pick an extreme pivot and cost n(n-1)/2
    comparisons; use randomized_quicksort when the input order is not trusted.

    Args:
        seq: mutable sequence (list, array.array, 1-D numpy array).
        low: first index of the range to sort.
        high: last index of the range to sort, defaults to len(seq) - 1.
        key: optional key function; pass functools.cmp_to_key(cmp) to sort
            with a comparator.

    Raises:
        IndexError: if low <= high and the range is not inside seq.
    """
    low, high = resolve_bounds(seq, low, high)
    _sort_range(seq, low, high, key)
    return seq
