#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file regenerates every table and figure for the debugging
and profiling lessons.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import yaml
from pathlib import Path
import time

from lesson_algorithms.experiments.exp_variant_agreement import run_variant_agreement_experiment
from lesson_algorithms.experiments.exp_profile_variants import run_profile_experiment
from lesson_algorithms.experiments.exp_search_faults import run_search_fault_experiment
from lesson_algorithms.plotting import plot_timings, plot_speedup


def main():
    parser = argparse.ArgumentParser(description='Run all lesson experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--output', type=str, default='data/results',
                        help='Output directory')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    print("=" * 60)
    print("Lesson Algorithms - Full Experiment Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  agreement_N_grid = {config['agreement_N_grid']}")
    print(f"  N_grid = {config['N_grid']}")
    print(f"  trial_max_N = {config['trial_max_N']:,}")
    print(f"  repeats = {config['repeats']}")
    print()

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Search fault reproduction (debugging lesson)
    print("-" * 60)
    print("1. First-Index Search Faults")
    print("-" * 60)
    start = time.time()
    df_search = run_search_fault_experiment(output_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Variant agreement (profiling lesson, correctness)
    print("-" * 60)
    print("2. Variant Agreement")
    print("-" * 60)
    start = time.time()
    df_agreement = run_variant_agreement_experiment(config['agreement_N_grid'], output_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Timing comparison (profiling lesson, speed)
    print("-" * 60)
    print("3. Profiling the Prime Generators")
    print("-" * 60)
    start = time.time()
    results = run_profile_experiment(
        config['N_grid'],
        output_dir,
        config['repeats'],
        config['trial_max_N']
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 4. Generate Figures
    print("-" * 60)
    print("4. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Timings...")
    plot_timings(results['summary'], figures_dir / 'timings.png')

    print("  - Speedup...")
    plot_speedup(results['summary'], config['baseline'], figures_dir / 'speedup.png')

    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print(f"\nFigures:")
    for f in sorted(figures_dir.glob('*.png')):
        print(f"  - figures/{f.name}")

    # Print key results
    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    print("\nSearch outcomes:")
    print(df_search.pivot(index='case', columns='search', values='outcome').to_string())

    disagree = df_agreement[~df_agreement['matches_reference']]
    if len(disagree) == 0:
        print("\nAll prime generators agree at every N.")
    else:
        print("\nDISAGREEMENTS:")
        print(disagree.to_string(index=False))

    print("\nGrowth exponents (log time vs log N):")
    print(results['growth'].to_string(index=False))


if __name__ == '__main__':
    main()
