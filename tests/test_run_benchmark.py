import importlib.util
import json
import sys
from pathlib import Path

import pandas as pd
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def _load_tool():
    path = REPO_ROOT / "tools" / "run_benchmark.py"
    spec = importlib.util.spec_from_file_location("run_benchmark_tool", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


tool = _load_tool()


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["run_benchmark.py", *args])
    return tool.main()


def test_main_writes_all_artifacts(monkeypatch, tmp_path):
    out = tmp_path / "bench"
    assert _run(monkeypatch, "--out-dir", str(out), "--sizes", "16", "32", "--repeats", "1", "--seed", "3", "--plot") == 0

    for name in ("benchmark_results.csv", "benchmark_report.json", "summary.md", "comparisons.png", "run_log.jsonl"):
        assert (out / name).exists(), name

    df = pd.read_csv(out / "benchmark_results.csv")
    assert set(df["n"]) == {16, 32}
    assert bool(df["is_sorted"].all())

    payload = json.loads((out / "benchmark_report.json").read_text(encoding="utf-8"))
    assert payload["config"]["seed"] == 3
    assert payload["adversarial"]["status"] == "Robust"

    summary = (out / "summary.md").read_text(encoding="utf-8")
    assert summary.startswith("# Quicksort benchmark")
    assert "Robust" in summary

    recs = [json.loads(line) for line in (out / "run_log.jsonl").read_text(encoding="utf-8").splitlines()]
    assert recs[-1]["event"] == "adversarial"
    assert all(r["context"]["seed"] == 3 for r in recs)


def test_main_reads_yaml_config(monkeypatch, tmp_path):
    cfg = tmp_path / "bench.yaml"
    cfg.write_text(
        "benchmark:\n  variants: [functional]\n  shapes: [random]\n  sizes: [8, 16]\n  repeats: 1\n",
        encoding="utf-8",
    )
    out = tmp_path / "out"
    assert _run(monkeypatch, "--config", str(cfg), "--out-dir", str(out), "--no-adversarial") == 0

    df = pd.read_csv(out / "benchmark_results.csv")
    assert set(df["variant"]) == {"functional"}
    assert not (out / "comparisons.png").exists()
    payload = json.loads((out / "benchmark_report.json").read_text(encoding="utf-8"))
    assert payload["adversarial"] == {}
    assert "Adversarial check" not in (out / "summary.md").read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "args",
    [
        ("--sizes", "0"),
        ("--repeats", "0"),
        ("--config", "does/not/exist.yaml"),
    ],
)
def test_main_rejects_bad_input(monkeypatch, tmp_path, args):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "--out-dir", str(tmp_path), *args)


def test_main_rejects_invalid_yaml_values(monkeypatch, tmp_path):
    cfg = tmp_path / "bench.yaml"
    cfg.write_text("repeats: 2.7\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Invalid benchmark config"):
        _run(monkeypatch, "--config", str(cfg), "--out-dir", str(tmp_path))


def test_write_md_summary_without_adversarial(tmp_path):
    out = tmp_path / "summary.md"
    tool._write_md_summary({"created_utc": "2026-01-01T00:00:00+00:00", "checks": {"all_sorted": True}}, out)
    text = out.read_text(encoding="utf-8")
    assert "All outputs sorted: True" in text
    assert "Adversarial" not in text
