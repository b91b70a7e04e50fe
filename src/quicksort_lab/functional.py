from __future__ import annotations

from typing import Any, List, Sequence

from .primitives import KeyFunc


def quicksort_functional(seq: Sequence[Any], *, key: KeyFunc = None) -> List[Any]:
    """Return a new ascending list; seq is left untouched.

    Three-way split around the middle element: values below the pivot, values
    equal to it, values above it. Only the outer buckets recurse, so inputs
    with many duplicates stay cheap. Memory is O(n) per level.
    """
    items = list(seq)
    if len(items) <= 1:
        return items

    pivot = items[len(items) // 2]
    pivot_key = pivot if key is None else key(pivot)

    less: List[Any] = []
    equal: List[Any] = []
    greater: List[Any] = []
    for item in items:
        k = item if key is None else key(item)
        if k < pivot_key:
            less.append(item)
        elif k > pivot_key:
            greater.append(item)
        else:
            equal.append(item)

    return quicksort_functional(less, key=key) + equal + quicksort_functional(greater, key=key)
