"""
Experiment: Reproducing the First-Index Search Fault

Runs each search policy on a set of minimal working examples and records
what happens: an index, the not-found result, or an exception. The
unbounded search must fault on every case whose target is absent, and the
bounded searches must never fault.
"""

import pandas as pd
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from ..search import (
    NOT_FOUND,
    TargetNotFoundError,
    first_index,
    first_index_strict,
    first_index_unbounded,
    first_index_vectorized,
)

# (label, target, values)
MWE_CASES: List[Tuple[str, int, list]] = [
    ('present_middle', 2, [1, 3, 2, 4, 5]),
    ('present_first', 1, [1, 3, 2, 4, 5]),
    ('present_last', 5, [1, 3, 2, 4, 5]),
    ('duplicates', 4, [4, 2, 4, 4]),
    ('absent', 1, [2, 3, 4]),
    ('empty', 1, []),
]

SEARCHES: Dict[str, Callable] = {
    'unbounded': first_index_unbounded,
    'bounded': first_index,
    'strict': first_index_strict,
    'vectorized': first_index_vectorized,
}


def run_search(search: Callable, target, values) -> Tuple[str, object]:
    """
    Run one search and classify the outcome.

    Returns
    -------
    tuple
        (outcome, detail) where outcome is 'found', 'not_found',
        'index_error' or 'target_not_found_error'.
    """
    try:
        index = search(target, values)
    except IndexError as exc:
        return 'index_error', str(exc)
    except TargetNotFoundError as exc:
        return 'target_not_found_error', str(exc)

    if index is NOT_FOUND:
        return 'not_found', None
    return 'found', index


def run_search_fault_experiment(output_dir: Path,
                                cases: List[Tuple[str, int, list]] = None) -> pd.DataFrame:
    """
    Run every search on every case and save search_faults.csv.

    Parameters
    ----------
    output_dir : Path
        Directory for output files.
    cases : list, optional
        (label, target, values) triples. Defaults to MWE_CASES.

    Returns
    -------
    pd.DataFrame
        Columns: case, target, values, search, outcome, detail.
    """
    if cases is None:
        cases = MWE_CASES

    print(f"Running search fault experiment on {len(cases)} cases")

    rows = []
    for label, target, values in cases:
        for name, search in SEARCHES.items():
            outcome, detail = run_search(search, target, values)
            rows.append({
                'case': label,
                'target': target,
                'values': str(values),
                'search': name,
                'outcome': outcome,
                'detail': detail
            })

    df = pd.DataFrame(rows, columns=['case', 'target', 'values', 'search', 'outcome', 'detail'])

    faults = df[df['outcome'] == 'index_error']
    print(f"  {len(faults)} unbounded-access faults in {faults['case'].nunique()} cases")

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'search_faults.csv', index=False)
    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    df = run_search_fault_experiment(Path('data/results'))
    print("\nOutcomes:")
    print(df.pivot(index='case', columns='search', values='outcome').to_string())
