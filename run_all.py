#!/usr/bin/env python3
"""run_all.py

Convenience entry point: runs the demo, then the benchmark with the default
config, writing outputs into _results/.

Usage:
python run_all.py
"""

from __future__ import annotations

from pathlib import Path
import subprocess
import sys


def run(cmd: list[str]) -> None:
    print("\n$", " ".join(cmd))
    subprocess.run(cmd, check=True)


def main() -> int:
    root = Path(__file__).resolve().parent
    out_dir = root / "_results" / "benchmark"
    out_dir.mkdir(parents=True, exist_ok=True)

    run([sys.executable, str(root / "tools" / "run_demo.py")])
    run([sys.executable, str(root / "tools" / "run_benchmark.py"),
         "--config", str(root / "configs" / "benchmark.yaml"),
         "--out-dir", str(out_dir),
         "--plot"])

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
