from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
from scipy import stats

from .config import BenchmarkSpec
from .datasets import make_sequence
from .logger import RunLogger
from .probe import count_comparisons, probe_sort
from .randomness import trial_seeds

RESULT_COLUMNS = ["variant", "shape", "n", "repeat", "elapsed_ms", "comparisons", "is_sorted", "is_permutation"]

# slope of log(comparisons) on log(n) above which growth is reported as quadratic
QUADRATIC_SLOPE = 1.5


def run_benchmark(spec: BenchmarkSpec, *, logger: Optional[RunLogger] = None) -> pd.DataFrame:
    """Probe every (shape, n, repeat, variant) combination of the spec.

    Every variant sees the same input for a given (shape, n, repeat); the
    repeat seed also drives the randomized pivot so runs are reproducible.
    """
    spec.validate()
    if logger is not None:
        logger.log("benchmark_start", spec.to_dict())

    seeds = trial_seeds(spec.seed, spec.repeats)
    rows: List[Dict[str, Any]] = []
    for shape in spec.shapes:
        for n in spec.sizes:
            for repeat, seed in enumerate(seeds):
                data = make_sequence(shape, n, seed=seed, value_range=spec.value_range)
                for variant in spec.variants:
                    res = probe_sort(data, variant, rng=seed)
                    row = {
                        "variant": variant,
                        "shape": shape,
                        "n": int(n),
                        "repeat": int(repeat),
                        "elapsed_ms": res.elapsed_ms,
                        "comparisons": res.comparisons,
                        "is_sorted": res.is_sorted,
                        "is_permutation": res.is_permutation,
                    }
                    rows.append(row)
                    if logger is not None:
                        logger.log("probe", row)

    df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    if logger is not None:
        logger.log("benchmark_end", {"rows": int(len(df)), "all_sorted": bool(df["is_sorted"].all())})
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of time and comparisons per (variant, shape, n)."""
    out = (
        df.groupby(["variant", "shape", "n"], sort=True)
        .agg(
            elapsed_ms_mean=("elapsed_ms", "mean"),
            elapsed_ms_std=("elapsed_ms", "std"),
            comparisons_mean=("comparisons", "mean"),
            comparisons_std=("comparisons", "std"),
            all_sorted=("is_sorted", "all"),
        )
        .reset_index()
    )
    return out.fillna({"elapsed_ms_std": 0.0, "comparisons_std": 0.0})


def estimate_growth(df: pd.DataFrame) -> Dict[str, Dict[str, Any]]:
    """Log-log regression of mean comparisons on n, per (variant, shape).

    A slope near 1 means n log n behaviour over the measured sizes, a slope
    near 2 means quadratic. Groups with fewer than two usable sizes are skipped.
    """
    out: Dict[str, Dict[str, Any]] = {}
    for (variant, shape), g in df.groupby(["variant", "shape"], sort=True):
        by_n = g.groupby("n")["comparisons"].mean()
        by_n = by_n[by_n.index.to_numpy() > 1]
        by_n = by_n[by_n > 0]
        if len(by_n) < 2:
            continue
        x = np.log(by_n.index.to_numpy(dtype=float))
        y = np.log(by_n.to_numpy(dtype=float))
        fit = stats.linregress(x, y)
        slope = float(fit.slope)
        out[f"{variant}/{shape}"] = {
            "variant": str(variant),
            "shape": str(shape),
            "slope": slope,
            "intercept": float(fit.intercept),
            "r_value": float(fit.rvalue),
            "sizes": [int(n) for n in by_n.index],
            "growth": "quadratic" if slope >= QUADRATIC_SLOPE else "n_log_n",
        }
    return out


def compare_adversarial(n: int, *, trials: int = 30, seed: int = 42) -> Dict[str, Any]:
    """Plain vs randomized pivot on an ascending input of length n.

    The plain in-place sort always makes n(n-1)/2 comparisons here. The
    randomized sort is run `trials` times with derived seeds; a one-sided
    t-test checks that its mean count sits below the quadratic count.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    if trials < 2:
        raise ValueError("trials must be at least 2")

    data = list(range(n))
    quadratic = n * (n - 1) / 2.0
    nlogn = n * math.log2(n)

    inplace = count_comparisons("inplace", data)
    counts = np.array(
        [count_comparisons("randomized", data, rng=s) for s in trial_seeds(seed, trials)],
        dtype=float,
    )
    mean = float(np.mean(counts))
    test = stats.ttest_1samp(counts, popmean=quadratic, alternative="less")
    p_value = float(test.pvalue)

    status = "Robust" if (mean < 0.5 * quadratic and p_value < 0.01) else "Degenerate"

    return {
        "status": status,
        "n": int(n),
        "trials": int(trials),
        "inplace_comparisons": int(inplace),
        "quadratic_comparisons": float(quadratic),
        "n_log2_n": float(nlogn),
        "randomized_mean": mean,
        "randomized_std": float(np.std(counts)),
        "randomized_max": float(np.max(counts)),
        "randomized_over_nlogn": float(mean / nlogn),
        "randomized_over_quadratic": float(mean / quadratic),
        "p_value_below_quadratic": p_value,
    }
