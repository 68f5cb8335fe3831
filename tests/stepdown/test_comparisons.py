"""
Tests for the comparison builder and the injected t CDF.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from holmsidak import holm_sidak
from holmsidak.core.exceptions import ConfigurationError
from holmsidak.stepdown import FAIL_TO_REJECT, NOT_EVALUATED, ScipyTDistribution
from holmsidak.stepdown._comparisons import comparison_pairs, t_pvalue
from holmsidak.stepdown._distribution import resolve_t_cdf


def finite_only_cdf(t, df):
    """Logistic stand-in for the t CDF that refuses non-finite input."""
    if not math.isfinite(t):
        raise AssertionError(f"t_cdf called with t={t}")
    return 1.0 / (1.0 + math.exp(-t))


class HalfDistribution:
    """TDistribution returning 0.5 everywhere: every two-sided p is 1."""

    name = 'half'

    def cdf(self, t, df):
        return 0.5


class TestPairs:

    def test_all_pairs_lexicographic(self):
        assert comparison_pairs(4, control=False) == [
            (1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4),
        ]

    def test_control_pairs(self):
        assert comparison_pairs(4, control=True) == [(1, 2), (1, 3), (1, 4)]

    def test_two_groups(self):
        assert comparison_pairs(2, control=False) == [(1, 2)]
        assert comparison_pairs(2, control=True) == [(1, 2)]


class TestPValue:

    @pytest.mark.parametrize("t", [-2.5, -0.3, 0.0, 1.7])
    def test_against_scipy(self, t):
        cdf = ScipyTDistribution().cdf
        df = 12
        assert_allclose(
            t_pvalue(t, df, "two.sided", cdf),
            2 * sp_stats.t.sf(abs(t), df), rtol=1e-10,
        )
        assert_allclose(t_pvalue(t, df, "less", cdf), sp_stats.t.cdf(t, df), rtol=1e-10)
        assert_allclose(t_pvalue(t, df, "greater", cdf), sp_stats.t.sf(t, df), rtol=1e-10)

    def test_infinite_limits(self):
        assert t_pvalue(math.inf, 5, "two.sided", finite_only_cdf) == 0.0
        assert t_pvalue(-math.inf, 5, "less", finite_only_cdf) == 0.0
        assert t_pvalue(math.inf, 5, "less", finite_only_cdf) == 1.0
        assert t_pvalue(math.inf, 5, "greater", finite_only_cdf) == 0.0

    def test_nan_is_one(self):
        assert t_pvalue(math.nan, 5, "two.sided", finite_only_cdf) == 1.0

    def test_clipped(self):
        assert t_pvalue(0.0, 5, "two.sided", lambda t, df: 0.6) == 1.0


class TestInjection:

    def test_callable(self, diameters):
        res = holm_sidak(*diameters, t_cdf=finite_only_cdf)
        c = res.comparison('1-2')
        assert_allclose(c.p_value, 2 * finite_only_cdf(-abs(c.t_statistic), 27), rtol=1e-12)
        assert res.info['t_cdf'] == 'finite_only_cdf'

    def test_protocol_object(self, diameters):
        res = holm_sidak(*diameters, t_cdf=HalfDistribution())
        assert res.info['t_cdf'] == 'half'
        # all p-values tie at 1: generation order is kept
        assert [c.label for c in res.comparisons] == [
            '1-2', '1-3', '1-4', '2-3', '2-4', '3-4',
        ]
        assert res.comparisons[0].decision == FAIL_TO_REJECT
        assert all(c.decision == NOT_EVALUATED for c in res.comparisons[1:])

    def test_infinite_t_never_reaches_cdf(self):
        with pytest.warns(RuntimeWarning):
            res = holm_sidak([1.0, 1.0], [2.0, 2.0], [2.0, 2.0], t_cdf=finite_only_cdf)
        assert res.comparison('1-2').p_value == 0.0
        assert res.comparison('2-3').p_value == 1.0

    def test_default_is_scipy(self):
        fn, name = resolve_t_cdf(None)
        assert name == 'scipy'
        assert fn(0.0, 10) == pytest.approx(0.5)

    def test_not_callable(self):
        with pytest.raises(ConfigurationError):
            holm_sidak([1.0, 2.0], [3.0, 4.0], t_cdf=42)

    def test_tied_p_values_from_data(self):
        """1-2 and 2-3 have identical t; 1-2 was generated first."""
        res = holm_sidak([0.0, 1.0, 2.0], [1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        assert [c.label for c in res.comparisons] == ['1-3', '1-2', '2-3']
        assert res.comparison('1-2').p_value == res.comparison('2-3').p_value


class TestNonFiniteCdf:

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_t_pvalue_raises(self, bad):
        with pytest.raises(ConfigurationError) as exc_info:
            t_pvalue(1.2, 10, "two.sided", lambda t, df: bad)
        assert exc_info.value.option == "t_cdf"

    def test_nan_never_reaches_stepdown(self, diameters):
        with pytest.raises(ConfigurationError):
            holm_sidak(*diameters, t_cdf=lambda t, df: math.nan)
