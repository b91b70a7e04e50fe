#!/usr/bin/env python3
from __future__ import annotations

import argparse

from quicksort_lab.datasets import make_sequence
from quicksort_lab.functional import quicksort_functional
from quicksort_lab.inplace import quicksort
from quicksort_lab.probe import probe_sort
from quicksort_lab.randomized import randomized_quicksort


def _print_samples() -> None:
    print("=== Quicksort demo ===")

    arr = [64, 34, 25, 12, 22, 11, 90]
    print("Original array:", arr)
    print("Sorted (in-place):", quicksort(list(arr)))
    print("Sorted (functional):", quicksort_functional(arr))
    print("Sorted (randomized):", randomized_quicksort(list(arr), rng=7))

    arr = [1, 2, 3, 4, 5]
    print("\nAlready sorted:", arr)
    print("Quicksort result:", quicksort(list(arr)))

    arr = [5, 4, 3, 2, 1]
    print("\nReverse sorted:", arr)
    print("Quicksort result:", quicksort(list(arr)))

    arr = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    print("\nWith duplicates:", arr)
    print("Quicksort result:", quicksort(list(arr)))

    print("\nEdge cases:")
    print("Single element [42]:", quicksort([42]))
    print("Empty array []:", quicksort([]))


def _print_timings(size: int, seed: int) -> None:
    data = make_sequence("random", size, seed=seed)
    print(f"\n=== Performance test ({size} elements) ===")
    for label, variant in (("In-place", "inplace"), ("Functional", "functional"), ("Randomized", "randomized")):
        res = probe_sort(data, variant, rng=seed, count=False)
        flag = "" if res.is_sorted and res.is_permutation else "  NOT SORTED"
        print(f"{label} quicksort: {res.elapsed_ms:.2f}ms{flag}")


def main() -> int:
    ap = argparse.ArgumentParser(description="Print sample quicksort runs and a timing comparison.")
    ap.add_argument("--size", type=int, default=10000, help="Number of random elements for the timing run.")
    ap.add_argument("--seed", type=int, default=42, help="Seed for the input and the randomized pivot.")
    ap.add_argument("--no-timing", action="store_true", help="Skip the timing comparison.")
    args = ap.parse_args()

    if args.size < 0:
        raise SystemExit("--size must be non-negative")

    _print_samples()
    if not args.no_timing:
        _print_timings(int(args.size), int(args.seed))
    print("\n=== Quicksort demo complete ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
