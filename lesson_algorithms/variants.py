"""
Registry of prime generators.

Responsibility: name every generator once so experiments, benchmarks and
tests iterate over the same set.
"""

import numpy as np
from typing import Callable, Dict, Optional

from .primes import primes_upto
from .trial_division import primes_naive, primes_early_exit, primes_with_helper
from .sieve import sieve_unbounded, sieve_sqrt_bound, sieve_vectorized
from .compiled import sieve_compiled

# Family labels
TRIAL = 'trial_division'
SIEVE = 'sieve'
COMPILED = 'compiled'

TRIAL_DIVISION: Dict[str, Callable[[int], np.ndarray]] = {
    'naive': primes_naive,
    'early_exit': primes_early_exit,
    'helper': primes_with_helper,
}

SIEVES: Dict[str, Callable[[int], np.ndarray]] = {
    'sieve_unbounded': sieve_unbounded,
    'sieve_sqrt_bound': sieve_sqrt_bound,
    'sieve_vectorized': sieve_vectorized,
    'sieve_compiled': sieve_compiled,
}

GENERATORS: Dict[str, Callable[[int], np.ndarray]] = {**TRIAL_DIVISION, **SIEVES}


def family_of(name: str) -> str:
    """Return the family label of a registered generator."""
    if name in TRIAL_DIVISION:
        return TRIAL
    if name == 'sieve_compiled':
        return COMPILED
    if name in SIEVES:
        return SIEVE
    raise KeyError(f"unknown generator {name!r}; known: {sorted(GENERATORS)}")


def get_generator(name: str) -> Callable[[int], np.ndarray]:
    """Look up a generator by name."""
    try:
        return GENERATORS[name]
    except KeyError:
        raise KeyError(f"unknown generator {name!r}; known: {sorted(GENERATORS)}") from None


def check_agreement(N: int,
                    generators: Optional[Dict[str, Callable[[int], np.ndarray]]] = None
                    ) -> Dict[str, bool]:
    """
    Run each generator at N and compare to the reference primes_upto.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    generators : dict, optional
        name -> function. Defaults to GENERATORS.

    Returns
    -------
    dict
        name -> True if the output equals the reference exactly.
    """
    if generators is None:
        generators = GENERATORS

    reference = primes_upto(N)
    return {name: bool(np.array_equal(func(N), reference))
            for name, func in generators.items()}
