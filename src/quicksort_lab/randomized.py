from __future__ import annotations

from typing import Any, MutableSequence, Optional, TypeVar

from .primitives import KeyFunc, partition, resolve_bounds, swap
from .randomness import IndexPicker, make_index_picker

S = TypeVar("S", bound=MutableSequence[Any])


def _sort_range(seq: MutableSequence[Any], low: int, high: int, key: KeyFunc, pick: IndexPicker) -> None:
    while low < high:
        swap(seq, pick(low, high), high)
        p = partition(seq, low, high, key=key)
        if p - low < high - p:
            _sort_range(seq, low, p - 1, key, pick)
            low = p + 1
        else:
            _sort_range(seq, p + 1, high, key, pick)
            high = p - 1


def randomized_quicksort(
    seq: S,
    low: int = 0,
    high: Optional[int] = None,
    *,
    key: KeyFunc = None,
    rng: Any = None,
) -> S:
    """In-place quicksort with a uniformly random pivot per partition.

    Same contract as quicksort(). Before each partition a random index of the
    current range is swapped into the pivot slot, which gives an expected
    O(n log n) comparison count for any fixed input.

    rng is anything make_index_picker accepts. Pass a seed or a seeded
    generator for reproducible runs; the default draws from a fresh
    random.Random per call, so concurrent sorts never share a generator.
    """
    low, high = resolve_bounds(seq, low, high)
    _sort_range(seq, low, high, key, make_index_picker(rng))
    return seq
