"""
Prime generation by trial division.

Responsibility: the three profiling-lesson generators. Each candidate c
in 2..N is tested against the primes found so far; they differ only in
how much work that test does, never in the result.

- primes_naive: tests every known prime, no early exit
- primes_early_exit: stops at the first divisor
- primes_with_helper: primes_early_exit with the test pulled out into
  has_prime_divisor

None of them stop at sqrt(c).
"""

import numpy as np
from typing import List

from .primes import check_bound, empty_primes


def primes_naive(N: int) -> np.ndarray:
    """
    Return all primes <= N, testing every known prime for each candidate.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    N = check_bound(N)
    if N < 2:
        return empty_primes()

    primes = []
    for c in range(2, N + 1):
        is_prime = True
        for p in primes:
            if c % p == 0:
                is_prime = False
        if is_prime:
            primes.append(c)
    return np.array(primes, dtype=np.int64)


def primes_early_exit(N: int) -> np.ndarray:
    """
    Return all primes <= N, stopping each candidate at its first divisor.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    N = check_bound(N)
    if N < 2:
        return empty_primes()

    primes = []
    for c in range(2, N + 1):
        is_prime = True
        for p in primes:
            if c % p == 0:
                is_prime = False
                break
        if is_prime:
            primes.append(c)
    return np.array(primes, dtype=np.int64)


def has_prime_divisor(c: int, primes: List[int]) -> bool:
    """Return True if any of primes divides c."""
    for p in primes:
        if c % p == 0:
            return True
    return False


def primes_with_helper(N: int) -> np.ndarray:
    """Same as primes_early_exit, with the divisor test in has_prime_divisor."""
    N = check_bound(N)
    if N < 2:
        return empty_primes()

    primes = []
    for c in range(2, N + 1):
        if not has_prime_divisor(c, primes):
            primes.append(c)
    return np.array(primes, dtype=np.int64)
