"""
Sieve of Eratosthenes, three ways.

Responsibility: the profiling-lesson sieves. All start from a marking
array of length N+1 with 0 and 1 marked composite, treat every unmarked
index as prime, and mark its multiples.

- sieve_unbounded: scans every i up to N, marks from 2*i one step at a time
- sieve_sqrt_bound: stops scanning once i > sqrt(N), marks from i*i
- sieve_vectorized: sqrt-bounded, marks with one strided slice
"""

import numpy as np
from math import isqrt

from .primes import check_bound, empty_primes


def _new_flags(N: int) -> np.ndarray:
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    return flags


def sieve_unbounded(N: int) -> np.ndarray:
    """
    Sieve with no stopping bound on the outer scan.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        int64 array of primes <= N.
    """
    N = check_bound(N)
    if N < 2:
        return empty_primes()

    flags = _new_flags(N)
    primes = []
    for i in range(2, N + 1):
        if flags[i]:
            primes.append(i)
            j = 2 * i
            while j <= N:
                flags[j] = False
                j += i
    return np.array(primes, dtype=np.int64)


def sieve_sqrt_bound(N: int) -> np.ndarray:
    """
    Sieve whose outer scan stops once i > sqrt(N).

    Every composite <= N has a prime factor <= sqrt(N), so nothing is
    left to mark after that point; the remaining unmarked indices are
    read off the flags.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        int64 array of primes <= N.
    """
    N = check_bound(N)
    if N < 2:
        return empty_primes()

    flags = _new_flags(N)
    i = 2
    while i * i <= N:
        if flags[i]:
            j = i * i
            while j <= N:
                flags[j] = False
                j += i
        i += 1
    return np.flatnonzero(flags).astype(np.int64)


def sieve_vectorized(N: int) -> np.ndarray:
    """Sqrt-bounded sieve marking all multiples of a prime in one slice."""
    N = check_bound(N)
    if N < 2:
        return empty_primes()
    flags = _new_flags(N)
    for i in range(2, isqrt(N) + 1):
        if flags[i]:
            flags[i * i::i] = False
    return np.flatnonzero(flags).astype(np.int64)
