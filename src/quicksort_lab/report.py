from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from .benchmark import estimate_growth, summarize
from .config import BenchmarkSpec

REPORT_VERSION = "0.1.0"


@dataclass(frozen=True)
class BenchmarkReport:
    version: str
    created_utc: str
    config: Dict[str, Any]
    summary: List[Dict[str, Any]]
    growth: Dict[str, Any]
    adversarial: Dict[str, Any]
    checks: Dict[str, Any]


def _json_default(obj: Any) -> Any:
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {obj.__class__.__name__} is not JSON serialisable")


def build_benchmark_report(
    df: pd.DataFrame,
    spec: BenchmarkSpec,
    *,
    adversarial: Optional[Dict[str, Any]] = None,
) -> BenchmarkReport:
    """Collects the benchmark table, growth fits and checks into one report.

    Checks:
    - every probe produced a sorted permutation of its input
    - the plain in-place variant shows quadratic growth on ascending input
      (expected, it documents the worst case)
    - the randomized variant does not
    """
    created = datetime.now(timezone.utc).isoformat()
    summary = summarize(df)
    growth = estimate_growth(df)

    def _growth_of(key: str) -> Optional[str]:
        g = growth.get(key)
        return None if g is None else str(g["growth"])

    checks: Dict[str, Any] = {
        "all_sorted": bool(df["is_sorted"].all()) if len(df) else True,
        "all_permutations": bool(df["is_permutation"].all()) if len(df) else True,
        "inplace_sorted_growth": _growth_of("inplace/sorted"),
        "randomized_sorted_growth": _growth_of("randomized/sorted"),
    }
    if adversarial is not None:
        checks["adversarial_status"] = adversarial.get("status")

    return BenchmarkReport(
        version=REPORT_VERSION,
        created_utc=created,
        config=spec.to_dict(),
        summary=summary.to_dict(orient="records"),
        growth=growth,
        adversarial=dict(adversarial or {}),
        checks=checks,
    )


def write_benchmark_report(report: BenchmarkReport, out_path: str | Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "version": report.version,
        "created_utc": report.created_utc,
        "config": report.config,
        "summary": report.summary,
        "growth": report.growth,
        "adversarial": report.adversarial,
        "checks": report.checks,
    }
    out_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False, default=_json_default),
        encoding="utf-8",
    )
