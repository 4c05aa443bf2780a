"""
Compiled sieve.

The profiling lesson ends by moving the hot loop into compiled code.
This is sieve_sqrt_bound's loop under numba; same output, no Python
interpreter overhead per marking step.
"""

import numpy as np
from numba import njit

from .primes import check_bound, empty_primes


@njit
def _mark_composites(N):
    flags = np.ones(N + 1, dtype=np.bool_)
    flags[0] = False
    flags[1] = False
    i = 2
    while i * i <= N:
        if flags[i]:
            for j in range(i * i, N + 1, i):
                flags[j] = False
        i += 1
    return flags


def sieve_compiled(N: int) -> np.ndarray:
    """
    JIT-compiled sqrt-bounded sieve.

    The first call includes compilation time.

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
    return np.flatnonzero(_mark_composites(N)).astype(np.int64)
