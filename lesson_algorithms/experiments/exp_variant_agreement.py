"""
Experiment: Variant Agreement

Every prime generator must return the same primes for the same N; they
differ only in speed. Checks each registered generator against the
reference sieve over a grid of N and writes the result table.
"""

import sys
import time
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..primes import primes_upto
from ..variants import GENERATORS


def verify_variants(N_grid: Iterable[int], generators: Optional[Dict] = None,
                    verbose: bool = True) -> pd.DataFrame:
    """
    Compare each generator to the reference at each N.

    Parameters
    ----------
    N_grid : iterable of int
        Upper bounds to check.
    generators : dict, optional
        name -> generator. Defaults to GENERATORS.
    verbose : bool
        Print one line per N.

    Returns
    -------
    pd.DataFrame
        Columns: N, variant, n_primes, matches_reference.
    """
    if generators is None:
        generators = GENERATORS

    rows = []
    for N in N_grid:
        reference = primes_upto(N)
        mismatches = []
        for name, func in generators.items():
            result = func(N)
            match = bool(np.array_equal(result, reference))
            if not match:
                mismatches.append(name)
            rows.append({
                'N': N,
                'variant': name,
                'n_primes': len(result),
                'matches_reference': match
            })

        if verbose:
            if mismatches:
                print(f"  N={N:>8,}  pi(N)={len(reference):>6,}  MISMATCH: {', '.join(mismatches)}")
            else:
                print(f"  N={N:>8,}  pi(N)={len(reference):>6,}  all {len(generators)} variants agree")

    return pd.DataFrame(rows, columns=['N', 'variant', 'n_primes', 'matches_reference'])


def run_variant_agreement_experiment(N_grid: Iterable[int],
                                     output_dir: Path) -> pd.DataFrame:
    """
    Run the agreement check and save variant_agreement.csv.

    Parameters
    ----------
    N_grid : iterable of int
        Upper bounds to check.
    output_dir : Path
        Directory for output files.

    Returns
    -------
    pd.DataFrame
        Agreement table.
    """
    N_grid = list(N_grid)
    print(f"Running variant agreement check on {len(N_grid)} bounds")

    df = verify_variants(N_grid)

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'variant_agreement.csv', index=False)
    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify all prime generators agree')
    parser.add_argument('--N', type=float, nargs='+', default=[1, 2, 10, 100, 1000, 5000],
                        help='Upper bounds to check')
    args = parser.parse_args()

    print("Variant Agreement Check")
    print("=" * 50)

    t0 = time.time()
    df = run_variant_agreement_experiment([int(N) for N in args.N], Path('data/results'))
    print(f"  Completed in {time.time() - t0:.1f}s")

    print("\n" + "=" * 50)
    if df['matches_reference'].all():
        print("✓ All variants agree!")
    else:
        print("✗ Some variants disagree!")
        sys.exit(1)
