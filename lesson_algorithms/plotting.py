"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_timings(summary: pd.DataFrame, output_path: Optional[Path] = None,
                 column: str = 'median_seconds') -> plt.Figure:
    """
    Plot time against N on log-log axes, one line per variant.

    Parameters
    ----------
    summary : pd.DataFrame
        Output of summarize_timings.
    output_path : Path, optional
        If provided, save figure to this path.
    column : str
        Timing column to plot.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    for variant, group in summary.groupby('variant', sort=False):
        group = group.sort_values('N')
        linestyle = '--' if group['family'].iloc[0] == 'trial_division' else '-'
        ax.plot(group['N'], group[column], marker='o', linestyle=linestyle, label=variant)

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('N (upper bound)')
    ax.set_ylabel('Seconds')
    ax.set_title('Prime generator timings')
    ax.legend()
    ax.grid(True, alpha=0.3, which='both')

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_speedup(summary: pd.DataFrame, baseline: str,
                 output_path: Optional[Path] = None,
                 column: str = 'median_seconds') -> plt.Figure:
    """
    Plot each variant's speedup over a baseline variant.

    Parameters
    ----------
    summary : pd.DataFrame
        Output of summarize_timings.
    baseline : str
        Variant name used as the denominator.
    output_path : Path, optional
        If provided, save figure.
    column : str
        Timing column to compare.

    Returns
    -------
    matplotlib.Figure

    Raises
    ------
    KeyError
        If baseline has no rows in summary.
    """
    if baseline not in set(summary['variant']):
        raise KeyError(f"baseline {baseline!r} not in summary; "
                       f"known: {sorted(summary['variant'].unique())}")

    fig, ax = plt.subplots(figsize=(8, 6))

    base = summary[summary['variant'] == baseline].set_index('N')[column]

    for variant, group in summary.groupby('variant', sort=False):
        if variant == baseline:
            continue
        group = group.set_index('N').sort_index()
        common = group.index.intersection(base.index)
        ax.plot(common, base[common] / group.loc[common, column], marker='o', label=variant)

    ax.axhline(1.0, color='gray', linestyle=':')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('N (upper bound)')
    ax.set_ylabel(f'Speedup over {baseline}')
    ax.legend()
    ax.grid(True, alpha=0.3, which='both')

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
