from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from .functional import quicksort_functional
from .inplace import quicksort
from .primitives import KeyFunc
from .randomized import randomized_quicksort
from .randomness import freeze_rng


@dataclass(frozen=True)
class ProbeResult:
    variant: str
    n: int
    elapsed_ms: float
    comparisons: Optional[int]
    is_sorted: bool
    is_permutation: bool


class _Tally:
    __slots__ = ("count",)

    def __init__(self) -> None:
        self.count = 0


class _Counted:
    """Wraps a value and counts every ordering comparison made on it."""

    __slots__ = ("value", "tally")

    def __init__(self, value: Any, tally: _Tally) -> None:
        self.value = value
        self.tally = tally

    def __lt__(self, other: "_Counted") -> bool:
        self.tally.count += 1
        return self.value < other.value

    def __le__(self, other: "_Counted") -> bool:
        self.tally.count += 1
        return self.value <= other.value

    def __gt__(self, other: "_Counted") -> bool:
        self.tally.count += 1
        return self.value > other.value

    def __ge__(self, other: "_Counted") -> bool:
        self.tally.count += 1
        return self.value >= other.value


def _run_inplace(seq: List[Any], rng: Any) -> List[Any]:
    return quicksort(seq)


def _run_functional(seq: List[Any], rng: Any) -> List[Any]:
    return quicksort_functional(seq)


def _run_randomized(seq: List[Any], rng: Any) -> List[Any]:
    return randomized_quicksort(seq, rng=rng)


VARIANTS: Dict[str, Callable[[List[Any], Any], List[Any]]] = {
    "inplace": _run_inplace,
    "functional": _run_functional,
    "randomized": _run_randomized,
}


def _runner(variant: str) -> Callable[[List[Any], Any], List[Any]]:
    if variant not in VARIANTS:
        raise ValueError(f"Unknown variant: {variant}")
    return VARIANTS[variant]


def is_sorted(seq: Sequence[Any], *, key: KeyFunc = None) -> bool:
    """True if seq is non-decreasing."""
    keys = list(seq) if key is None else [key(x) for x in seq]
    return all(keys[i] <= keys[i + 1] for i in range(len(keys) - 1))


def is_permutation(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """True if a and b hold the same multiset of elements."""
    la, lb = list(a), list(b)
    if len(la) != len(lb):
        return False
    try:
        return Counter(la) == Counter(lb)
    except TypeError:
        # unhashable elements
        return sorted(la) == sorted(lb)


def count_comparisons(variant: str, seq: Sequence[Any], *, rng: Any = None) -> int:
    """Number of element comparisons the variant makes to sort a copy of seq."""
    run = _runner(variant)
    tally = _Tally()
    run([_Counted(v, tally) for v in seq], rng)
    return tally.count


def probe_sort(seq: Sequence[Any], variant: str = "inplace", *, rng: Any = None, count: bool = True) -> ProbeResult:
    """Time one sort of a copy of seq and check the result.

    The caller's sequence is never mutated. Comparisons are counted in a
    separate pass on wrapped elements so the timing is not skewed. A stateful
    rng (None, random.Random, numpy Generator) is reduced to one seed first,
    so both passes see the same pivots. A plain callable rng is used as is.
    """
    run = _runner(variant)
    rng = freeze_rng(rng)
    original = list(seq)
    work = list(original)

    t0 = time.perf_counter()
    out = run(work, rng)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    comparisons = count_comparisons(variant, original, rng=rng) if count else None

    return ProbeResult(
        variant=variant,
        n=len(original),
        elapsed_ms=float(elapsed_ms),
        comparisons=comparisons,
        is_sorted=is_sorted(out),
        is_permutation=is_permutation(out, original),
    )
