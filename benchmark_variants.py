#!/usr/bin/env python3
"""
Quick benchmark of every prime generator at a single N.

Compares:
1. Trial division: naive, early exit, helper
2. Sieves: unbounded scan, sqrt bound, vectorized, compiled

Trial division is skipped above --trial-max-N.
"""

import argparse
import numpy as np

from lesson_algorithms.primes import primes_upto
from lesson_algorithms.profiling import time_call
from lesson_algorithms.variants import TRIAL_DIVISION, SIEVES


def benchmark(N: int, repeats: int, trial_max_N: int):
    """Time each generator at N, print a table and return speedups over the slowest."""
    print("=" * 60)
    print(f"Prime Generator Benchmark: N = {N:,}")
    print("=" * 60)

    reference = primes_upto(N)
    print(f"pi(N) = {len(reference):,}")
    print()

    # JIT compilation happens on the first call
    SIEVES['sieve_compiled'](10)

    results = {}
    for group, variants in [('Trial division', TRIAL_DIVISION), ('Sieves', SIEVES)]:
        print("-" * 60)
        print(group)
        print("-" * 60)

        if group == 'Trial division' and N > trial_max_N:
            print(f"  skipped (N > {trial_max_N:,})")
            print()
            continue

        for name, func in variants.items():
            durations, result = time_call(func, N, repeats)
            best = min(durations)
            results[name] = best
            status = "OK" if np.array_equal(result, reference) else "MISMATCH!"
            print(f"  {name:<18} {best:>10.4f}s  {status}")
        print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    slowest = max(results, key=results.get)
    speedups = {}
    for name, best in sorted(results.items(), key=lambda item: item[1]):
        # Timer resolution can report 0.0 at tiny N
        if best > 0:
            speedups[name] = results[slowest] / best
            print(f"  {name:<18} {speedups[name]:>10.1f}x faster than {slowest}")
        else:
            print(f"  {name:<18} {'n/a':>10}  (below timer resolution)")

    return speedups


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark prime generators')
    parser.add_argument('--N', type=float, default=1e4, help='Upper bound')
    parser.add_argument('--repeats', type=int, default=3, help='Timed calls per variant')
    parser.add_argument('--trial-max-N', type=float, default=5e4,
                        help='Skip trial division above this bound')
    args = parser.parse_args()

    benchmark(int(args.N), args.repeats, int(args.trial_max_N))
