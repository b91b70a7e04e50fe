from __future__ import annotations

from typing import Callable, Dict, List

import numpy as np


def make_random(n: int, seed: int, value_range: int = 1000) -> List[int]:
    rng = np.random.default_rng(seed)
    return rng.integers(0, value_range, size=n).tolist()


def make_sorted(n: int, seed: int, value_range: int = 1000) -> List[int]:
    return list(range(n))


def make_reversed(n: int, seed: int, value_range: int = 1000) -> List[int]:
    return list(range(n - 1, -1, -1))


def make_few_unique(n: int, seed: int, value_range: int = 1000) -> List[int]:
    rng = np.random.default_rng(seed)
    distinct = max(1, min(value_range, n // 10))
    return rng.integers(0, distinct, size=n).tolist()


def make_nearly_sorted(n: int, seed: int, value_range: int = 1000) -> List[int]:
    """Ascending run with about 5% of positions swapped at random."""
    rng = np.random.default_rng(seed)
    arr = list(range(n))
    if n < 2:
        return arr
    for _ in range(max(1, n // 20)):
        i, j = rng.choice(n, size=2, replace=False)
        arr[int(i)], arr[int(j)] = arr[int(j)], arr[int(i)]
    return arr


def make_constant(n: int, seed: int, value_range: int = 1000) -> List[int]:
    return [0] * n


SHAPES: Dict[str, Callable[..., List[int]]] = {
    "random": make_random,
    "sorted": make_sorted,
    "reversed": make_reversed,
    "few_unique": make_few_unique,
    "nearly_sorted": make_nearly_sorted,
    "constant": make_constant,
}


def make_sequence(shape: str, n: int, *, seed: int = 0, value_range: int = 1000) -> List[int]:
    """Build an input sequence of the given shape.

    "random" draws uniform integers in [0, value_range), the distribution the
    timing demo has always used.
    """
    if shape not in SHAPES:
        raise ValueError(f"Unknown shape: {shape}")
    if n < 0:
        raise ValueError("n must be non-negative")
    return SHAPES[shape](int(n), int(seed), int(value_range))
