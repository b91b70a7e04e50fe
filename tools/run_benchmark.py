#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from quicksort_lab.benchmark import compare_adversarial, run_benchmark, summarize  # noqa: E402
from quicksort_lab.config import BenchmarkSpec, load_benchmark_spec  # noqa: E402
from quicksort_lab.logger import RunLogger  # noqa: E402
from quicksort_lab.report import build_benchmark_report, write_benchmark_report  # noqa: E402


def _plot_comparisons(summary: pd.DataFrame, out_dir: Path) -> None:
    shapes = sorted(summary["shape"].unique())
    fig, axes = plt.subplots(1, len(shapes), figsize=(5.0 * len(shapes), 4.5), squeeze=False)
    for ax, shape in zip(axes[0], shapes):
        sub = summary[summary["shape"] == shape]
        for variant, g in sub.groupby("variant"):
            g = g.sort_values("n")
            ax.plot(g["n"], g["comparisons_mean"], marker="o", linewidth=2.0, label=str(variant))
        ax.set_title(shape, fontsize=12)
        ax.set_xlabel("n")
        ax.set_ylabel("comparisons")
        ax.set_xscale("log")
        ax.set_yscale("log")
        ax.grid(True, alpha=0.3, linestyle="--")
        ax.legend()
    fig.tight_layout()
    fig.savefig(out_dir / "comparisons.png", dpi=140)
    plt.close(fig)


def _write_md_summary(payload: dict, out_path: Path) -> None:
    checks = payload.get("checks") or {}
    adv = payload.get("adversarial") or {}
    lines = [
        "# Quicksort benchmark",
        "",
        f"Date (UTC): {payload.get('created_utc', '')}",
        "",
        f"All outputs sorted: {checks.get('all_sorted')}",
        f"In-place growth on sorted input: {checks.get('inplace_sorted_growth')}",
        f"Randomized growth on sorted input: {checks.get('randomized_sorted_growth')}",
    ]
    if adv:
        lines += [
            "",
            f"Adversarial check (n={adv.get('n')}, trials={adv.get('trials')}): **{adv.get('status')}**",
            f"- in-place comparisons: {adv.get('inplace_comparisons')}",
            f"- randomized mean comparisons: {adv.get('randomized_mean', float('nan')):.1f}",
            f"- p-value (mean below quadratic): {adv.get('p_value_below_quadratic', float('nan')):.3g}",
        ]
    lines.append("")
    out_path.write_text("\n".join(lines), encoding="utf-8")


def main() -> int:
    ap = argparse.ArgumentParser(description="Benchmark the quicksort variants and write a report.")
    ap.add_argument("--config", type=str, default="", help="YAML benchmark config (see configs/benchmark.yaml).")
    ap.add_argument("--out-dir", type=str, default="_bench_out", help="Output directory.")
    ap.add_argument("--sizes", type=int, nargs="+", help="Override the input sizes.")
    ap.add_argument("--repeats", type=int, help="Override the number of repeats.")
    ap.add_argument("--seed", type=int, help="Override the master seed.")
    ap.add_argument("--plot", action="store_true", help="Write a PNG of comparison counts with matplotlib.")
    ap.add_argument("--no-adversarial", action="store_true", help="Skip the randomized-vs-plain statistical check.")
    args = ap.parse_args()

    if args.config:
        cfg_path = Path(args.config)
        if not cfg_path.exists():
            raise SystemExit(f"Missing config: {cfg_path}")
        try:
            spec = load_benchmark_spec(cfg_path)
        except ValueError as exc:
            raise SystemExit(f"Invalid benchmark config: {exc}")
    else:
        spec = BenchmarkSpec()

    overrides = {}
    if args.sizes:
        overrides["sizes"] = tuple(args.sizes)
    if args.repeats is not None:
        overrides["repeats"] = int(args.repeats)
    if args.seed is not None:
        overrides["seed"] = int(args.seed)
    spec = replace(spec, **overrides)
    try:
        spec.validate()
    except ValueError as exc:
        raise SystemExit(f"Invalid benchmark config: {exc}")

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    logger = RunLogger(out_dir, context={"seed": spec.seed, "sizes": list(spec.sizes), "repeats": spec.repeats})

    df = run_benchmark(spec, logger=logger)
    df.to_csv(out_dir / "benchmark_results.csv", index=False)

    adversarial = None
    if not args.no_adversarial:
        adversarial = compare_adversarial(spec.adversarial_n, trials=spec.adversarial_trials, seed=spec.seed)
        logger.log("adversarial", adversarial)

    report = build_benchmark_report(df, spec, adversarial=adversarial)
    json_path = out_dir / "benchmark_report.json"
    write_benchmark_report(report, json_path)

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    _write_md_summary(payload, out_dir / "summary.md")

    if args.plot:
        _plot_comparisons(summarize(df), out_dir)

    print(f"Wrote {len(df)} probes to {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
