"""
Tests for the timing harness and growth-exponent fit.

Timings themselves are machine dependent, so these tests check table
shape and bookkeeping, and check the fit on synthetic data.
"""

import numpy as np
import pandas as pd
import pytest

from lesson_algorithms.profiling import (
    fit_growth_exponent,
    summarize_timings,
    time_call,
    time_variants,
)
from lesson_algorithms.sieve import sieve_sqrt_bound, sieve_vectorized
from lesson_algorithms.trial_division import primes_naive


class TestTimeCall:

    def test_one_duration_per_repeat(self):
        durations, result = time_call(sieve_vectorized, 100, repeats=4)
        assert len(durations) == 4
        assert all(d >= 0 for d in durations)
        assert len(result) == 25

    def test_invalid_repeats(self):
        with pytest.raises(ValueError):
            time_call(sieve_vectorized, 100, repeats=0)


class TestTimeVariants:

    def test_long_format(self):
        variants = {'naive': primes_naive, 'sieve_vectorized': sieve_vectorized}
        df = time_variants([10, 100], variants, repeats=2)

        assert list(df.columns) == ['variant', 'family', 'N', 'repeat', 'seconds', 'n_primes']
        assert len(df) == 2 * 2 * 2
        assert set(df['family']) == {'trial_division', 'sieve'}

        counts = df.groupby('N')['n_primes'].unique()
        assert list(counts[10]) == [4]
        assert list(counts[100]) == [25]

    def test_empty_grid(self):
        df = time_variants([], {'naive': primes_naive}, repeats=1)
        assert len(df) == 0


class TestSummarize:

    def test_median_and_min(self):
        df = pd.DataFrame({
            'variant': ['a'] * 3 + ['b'] * 3,
            'family': ['sieve'] * 6,
            'N': [10] * 6,
            'repeat': [0, 1, 2] * 2,
            'seconds': [3.0, 1.0, 2.0, 6.0, 4.0, 5.0],
            'n_primes': [4] * 6
        })
        summary = summarize_timings(df).set_index('variant')

        assert summary.loc['a', 'median_seconds'] == 2.0
        assert summary.loc['a', 'min_seconds'] == 1.0
        assert summary.loc['b', 'median_seconds'] == 5.0
        assert summary.loc['b', 'min_seconds'] == 4.0

    def test_real_timings(self):
        df = time_variants([50, 500], {'sieve_sqrt_bound': sieve_sqrt_bound}, repeats=3)
        summary = summarize_timings(df)
        assert len(summary) == 2
        assert (summary['min_seconds'] <= summary['median_seconds']).all()


class TestGrowthExponent:

    def _summary(self, N, seconds, variant='v'):
        return pd.DataFrame({
            'variant': variant,
            'family': 'sieve',
            'N': N,
            'n_primes': 0,
            'median_seconds': seconds,
            'min_seconds': seconds
        })

    def test_linear_growth(self):
        N = np.array([100, 1000, 10000, 100000])
        growth = fit_growth_exponent(self._summary(N, 2e-6 * N))
        assert growth.loc[0, 'exponent'] == pytest.approx(1.0)
        assert growth.loc[0, 'r_squared'] == pytest.approx(1.0)

    def test_quadratic_growth(self):
        N = np.array([100, 200, 400, 800])
        growth = fit_growth_exponent(self._summary(N, 1e-9 * N.astype(float) ** 2))
        assert growth.loc[0, 'exponent'] == pytest.approx(2.0)

    def test_single_point_is_nan(self):
        growth = fit_growth_exponent(self._summary([100], [0.5]))
        assert np.isnan(growth.loc[0, 'exponent'])

    def test_one_row_per_variant(self):
        N = [10, 100]
        summary = pd.concat([self._summary(N, [1.0, 10.0], 'a'),
                             self._summary(N, [1.0, 100.0], 'b')], ignore_index=True)
        growth = fit_growth_exponent(summary).set_index('variant')
        assert growth.loc['a', 'exponent'] == pytest.approx(1.0)
        assert growth.loc['b', 'exponent'] == pytest.approx(2.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
