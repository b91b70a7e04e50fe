"""quicksort_lab

Quicksort variants over in-memory sequences, with a small measurement harness.

The package exposes:
- quicksort: in-place Lomuto quicksort (last element as pivot)
- quicksort_functional: three-way copying quicksort, never mutates its input
- randomized_quicksort: in-place quicksort with an injected random pivot source
- partition / swap primitives
- probe_sort and comparison counting, benchmark suite, JSON report
"""

from .benchmark import compare_adversarial, estimate_growth, run_benchmark, summarize
from .config import BenchmarkSpec, load_benchmark_spec
from .datasets import SHAPES, make_sequence
from .functional import quicksort_functional
from .inplace import quicksort
from .logger import RunLogger
from .primitives import partition, resolve_bounds, swap
from .probe import VARIANTS, ProbeResult, count_comparisons, is_permutation, is_sorted, probe_sort
from .randomized import randomized_quicksort
from .randomness import make_index_picker
from .report import build_benchmark_report, write_benchmark_report

__version__ = "0.1.0"

__all__ = [
    "quicksort",
    "quicksort_functional",
    "randomized_quicksort",
    "partition",
    "swap",
    "resolve_bounds",
    "make_index_picker",
    "SHAPES",
    "make_sequence",
    "VARIANTS",
    "ProbeResult",
    "probe_sort",
    "count_comparisons",
    "is_sorted",
    "is_permutation",
    "BenchmarkSpec",
    "load_benchmark_spec",
    "RunLogger",
    "run_benchmark",
    "summarize",
    "estimate_growth",
    "compare_adversarial",
    "build_benchmark_report",
    "write_benchmark_report",
]
