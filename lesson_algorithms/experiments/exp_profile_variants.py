"""
Experiment: Profiling the Prime Generators

Times every generator over a grid of N, reduces repeats to medians and
fits an empirical growth exponent per variant. Trial division is only
timed up to trial_max_N since its cost grows much faster than the sieves'.
"""

import pandas as pd
from pathlib import Path
from typing import Dict, Iterable

from ..variants import TRIAL_DIVISION, SIEVES
from ..profiling import time_variants, summarize_timings, fit_growth_exponent


def run_profile_experiment(N_grid: Iterable[int], output_dir: Path,
                           repeats: int = 3,
                           trial_max_N: int = 20000) -> Dict[str, pd.DataFrame]:
    """
    Run the timing comparison.

    Parameters
    ----------
    N_grid : iterable of int
        Upper bounds to time.
    output_dir : Path
        Directory for output files.
    repeats : int
        Timed calls per (variant, N).
    trial_max_N : int
        Largest N at which trial-division variants are timed.

    Returns
    -------
    dict
        {'timings': raw, 'summary': per (variant, N), 'growth': exponents}
    """
    N_grid = sorted(set(N_grid))
    print(f"Running profiling experiment over N = {N_grid}")

    trial_grid = [N for N in N_grid if N <= trial_max_N]
    print(f"  Timing {len(TRIAL_DIVISION)} trial-division variants on {len(trial_grid)} bounds...")
    df_trial = time_variants(trial_grid, TRIAL_DIVISION, repeats=repeats)

    print(f"  Timing {len(SIEVES)} sieve variants on {len(N_grid)} bounds...")
    df_sieve = time_variants(N_grid, SIEVES, repeats=repeats)

    df = pd.concat([df_trial, df_sieve], ignore_index=True)
    summary = summarize_timings(df)
    growth = fit_growth_exponent(summary)

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'timings_raw.csv', index=False)
    summary.to_csv(output_dir / 'timings_summary.csv', index=False)
    growth.to_csv(output_dir / 'growth_exponents.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return {'timings': df, 'summary': summary, 'growth': growth}


if __name__ == '__main__':
    import yaml

    with open('config/default.yaml') as f:
        config = yaml.safe_load(f)

    output_dir = Path('data/results')
    results = run_profile_experiment(config['N_grid'], output_dir,
                                     config['repeats'], config['trial_max_N'])
    print("\nGrowth exponents:")
    print(results['growth'].to_string(index=False))
