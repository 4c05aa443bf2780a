"""
Timing harness for prime generators.

Responsibility: wall-clock measurements and their summaries. Timing
results are long-format DataFrames with one row per (variant, N, repeat).
"""

import time
import numpy as np
import pandas as pd
from scipy import stats
from typing import Callable, Dict, Iterable, List, Tuple

from .variants import family_of


def time_call(func: Callable[[int], np.ndarray], N: int,
              repeats: int = 3) -> Tuple[List[float], np.ndarray]:
    """
    Time func(N) repeats times.

    Parameters
    ----------
    func : callable
        Prime generator.
    N : int
        Upper bound passed to func.
    repeats : int
        Number of timed calls (>= 1).

    Returns
    -------
    tuple
        (list of durations in seconds, result of the last call)
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    durations = []
    result = None
    for _ in range(repeats):
        t0 = time.perf_counter()
        result = func(N)
        durations.append(time.perf_counter() - t0)
    return durations, result


def time_variants(N_grid: Iterable[int],
                  variants: Dict[str, Callable[[int], np.ndarray]],
                  repeats: int = 3,
                  warmup: bool = True) -> pd.DataFrame:
    """
    Time every variant at every N.

    Parameters
    ----------
    N_grid : iterable of int
        Upper bounds to test.
    variants : dict
        name -> generator.
    repeats : int
        Timed calls per (variant, N).
    warmup : bool
        Call each variant once at N=10 before timing, so JIT compilation
        is not measured.

    Returns
    -------
    pd.DataFrame
        Columns: variant, family, N, repeat, seconds, n_primes.
    """
    N_grid = list(N_grid)

    if warmup:
        for func in variants.values():
            func(10)

    rows = []
    for name, func in variants.items():
        family = family_of(name)
        for N in N_grid:
            durations, result = time_call(func, N, repeats)
            for r, seconds in enumerate(durations):
                rows.append({
                    'variant': name,
                    'family': family,
                    'N': N,
                    'repeat': r,
                    'seconds': seconds,
                    'n_primes': len(result)
                })

    return pd.DataFrame(rows, columns=['variant', 'family', 'N', 'repeat',
                                       'seconds', 'n_primes'])


def summarize_timings(df: pd.DataFrame) -> pd.DataFrame:
    """
    Reduce repeats to median and min seconds per (variant, N).

    Returns
    -------
    pd.DataFrame
        Columns: variant, family, N, n_primes, median_seconds, min_seconds.
    """
    summary = (df.groupby(['variant', 'family', 'N', 'n_primes'], sort=False)['seconds']
                 .agg(median_seconds='median', min_seconds='min')
                 .reset_index())
    return summary


def fit_growth_exponent(summary: pd.DataFrame,
                        column: str = 'median_seconds') -> pd.DataFrame:
    """
    Fit log(seconds) = exponent * log(N) + intercept for each variant.

    An exponent near 1 means time grows linearly in N, near 2 quadratically.

    Parameters
    ----------
    summary : pd.DataFrame
        Output of summarize_timings.
    column : str
        Timing column to fit.

    Returns
    -------
    pd.DataFrame
        Columns: variant, exponent, intercept, r_squared. NaN where fewer
        than two distinct N with positive time are available.
    """
    rows = []
    for variant, group in summary.groupby('variant', sort=False):
        group = group[group[column] > 0]
        if group['N'].nunique() < 2:
            rows.append({'variant': variant, 'exponent': np.nan,
                         'intercept': np.nan, 'r_squared': np.nan})
            continue

        fit = stats.linregress(np.log(group['N'].astype(float)),
                               np.log(group[column].astype(float)))
        rows.append({
            'variant': variant,
            'exponent': fit.slope,
            'intercept': fit.intercept,
            'r_squared': fit.rvalue ** 2
        })

    return pd.DataFrame(rows, columns=['variant', 'exponent', 'intercept', 'r_squared'])
