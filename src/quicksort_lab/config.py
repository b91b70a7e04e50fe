from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from .datasets import SHAPES
from .probe import VARIANTS


@dataclass(frozen=True)
class BenchmarkSpec:
    """Benchmark declaration.

    Serialized into the JSON report so a run can be reproduced. Adversarial
    shapes (sorted, reversed, constant) cost n^2/2 comparisons in the plain
    in-place variant, so keep sizes in the low thousands when they are enabled.
    """

    variants: tuple[str, ...] = ("inplace", "functional", "randomized")
    shapes: tuple[str, ...] = ("random", "sorted", "reversed", "few_unique")
    sizes: tuple[int, ...] = (100, 250, 500, 1000)
    repeats: int = 3
    seed: int = 42
    value_range: int = 1000

    # Statistical check of the randomized pivot on ascending input
    adversarial_n: int = 300
    adversarial_trials: int = 30

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        if not self.variants:
            raise ValueError("variants must be non-empty")
        unknown = [v for v in self.variants if v not in VARIANTS]
        if unknown:
            raise ValueError(f"Unknown variants: {unknown}")
        if not self.shapes:
            raise ValueError("shapes must be non-empty")
        unknown = [s for s in self.shapes if s not in SHAPES]
        if unknown:
            raise ValueError(f"Unknown shapes: {unknown}")
        if not self.sizes or any(n <= 0 for n in self.sizes):
            raise ValueError("sizes must be positive")
        if self.repeats <= 0:
            raise ValueError("repeats must be positive")
        if self.value_range <= 0:
            raise ValueError("value_range must be positive")
        if self.adversarial_n < 2:
            raise ValueError("adversarial_n must be at least 2")
        if self.adversarial_trials < 2:
            raise ValueError("adversarial_trials must be at least 2")


_TUPLE_FIELDS = {"variants": str, "shapes": str, "sizes": int}


def _check_type(name: str, value: Any, kind: type) -> Any:
    # no coercion: 2.7 or "10" must not silently become an int
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"{name} must be of type {kind.__name__}, got {value!r}")
    return value


def spec_from_mapping(raw: Dict[str, Any]) -> BenchmarkSpec:
    """Build a validated BenchmarkSpec; missing keys keep their defaults."""
    if not isinstance(raw, dict):
        raise ValueError("benchmark config must be a mapping")
    known = {f.name for f in fields(BenchmarkSpec)}
    extra = sorted(set(raw) - known)
    if extra:
        raise ValueError(f"Unknown benchmark keys: {extra}")

    kwargs: Dict[str, Any] = {}
    for name, value in raw.items():
        if name in _TUPLE_FIELDS:
            if isinstance(value, (str, int)):
                value = [value]
            if not isinstance(value, (list, tuple)):
                raise ValueError(f"{name} must be a list")
            kwargs[name] = tuple(_check_type(name, v, _TUPLE_FIELDS[name]) for v in value)
        else:
            kwargs[name] = _check_type(name, value, int)
    spec = BenchmarkSpec(**kwargs)
    spec.validate()
    return spec


def load_benchmark_spec(path: str | Path | None = None) -> BenchmarkSpec:
    """Load a spec from YAML. The file may hold the keys at top level or under `benchmark:`."""
    if path is None:
        spec = BenchmarkSpec()
        spec.validate()
        return spec
    p = Path(path)
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if "benchmark" in raw:
        raw = raw.get("benchmark") or {}
    return spec_from_mapping(raw)
