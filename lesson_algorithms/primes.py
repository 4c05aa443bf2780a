"""
Prime generation utilities shared by every variant.

Responsibility: bound validation and the reference prime list. The
lesson variants live in trial_division.py and sieve.py.
"""

import numbers

import numpy as np


def check_bound(N) -> int:
    """
    Validate an upper bound and return it as a plain int.

    Parameters
    ----------
    N : int
        Upper bound (inclusive). Any integral value >= 0.

    Returns
    -------
    int

    Raises
    ------
    ValueError
        If N is a bool, not integral, or negative.
    """
    if isinstance(N, bool) or not isinstance(N, numbers.Integral):
        raise ValueError(f"bound must be an integer, got {N!r}")
    if N < 0:
        raise ValueError(f"bound must be >= 0, got {N}")
    return int(N)


def empty_primes() -> np.ndarray:
    """Result for bounds below 2."""
    return np.array([], dtype=np.int64)


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes with strided slice marking.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    N = check_bound(N)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Reference implementation the lesson variants are checked against.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    flags = prime_flags_upto(N)
    return np.flatnonzero(flags).astype(np.int64)
