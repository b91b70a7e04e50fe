from __future__ import annotations

import numbers
import random
from typing import Any, Callable, List

import numpy as np

IndexPicker = Callable[[int, int], int]

_SEED_MAX = 2**31 - 1


def make_index_picker(rng: Any = None) -> IndexPicker:
    """Adapt a randomness source to pick(low, high), uniform over [low, high].

    Accepted sources:
    - None: a fresh random.Random() owned by the caller's sort
    - an integer seed (int or numpy integer): seeds a new random.Random
    - random.Random: its randint
    - numpy.random.Generator: integers(low, high + 1)
    - any callable (low, high) -> int, used as is
    """
    if rng is None:
        return random.Random().randint
    if isinstance(rng, (bool, np.bool_)):
        raise TypeError("rng must not be a bool")
    if isinstance(rng, numbers.Integral):
        return random.Random(int(rng)).randint
    if isinstance(rng, random.Random):
        return rng.randint
    if isinstance(rng, np.random.Generator):
        gen = rng

        def pick(low: int, high: int) -> int:
            return int(gen.integers(low, high + 1))

        return pick
    if callable(rng):
        return rng
    raise TypeError(f"Unsupported rng of type {type(rng).__name__}")


def freeze_rng(rng: Any = None) -> Any:
    """Turn a stateful source into one int seed so it can drive several identical runs.

    Generators and None are consumed once here; integer seeds and callables
    are returned unchanged.
    """
    if rng is None:
        return random.Random().randrange(1, _SEED_MAX)
    if isinstance(rng, random.Random):
        return rng.randrange(1, _SEED_MAX)
    if isinstance(rng, np.random.Generator):
        return int(rng.integers(1, _SEED_MAX))
    return rng


def trial_seeds(master_seed: int, n: int) -> List[int]:
    """Deterministic per-trial seeds derived from one master seed."""
    r = random.Random(master_seed)
    return [r.randrange(1, _SEED_MAX) for _ in range(n)]
