"""
Tests for HolmSidakSolution accessors and summary().
"""

import pytest

from holmsidak import holm_sidak
from holmsidak.stepdown import HolmSidakSolution


class TestAccessors:

    def test_echoes_options(self, diameters):
        res = holm_sidak(*diameters, control=True, alpha=0.01, tail="less")
        assert res.alpha == 0.01
        assert res.tail == "less"
        assert res.control is True

    def test_metadata(self, diameters):
        res = holm_sidak(*diameters)
        assert res.backend_name == 'cpu_holm_sidak'
        assert res.info['n_comparisons'] == 6
        assert res.info['n_groups'] == 4
        assert 'total_seconds' in res.timing
        assert 'stepdown' in res.timing
        assert res.warnings == ()

    def test_comparison_lookup(self, diameters):
        res = holm_sidak(*diameters)
        assert res.comparison('2-3').group1 == 2
        with pytest.raises(KeyError):
            res.comparison('4-1')

    def test_repr(self, diameters):
        res = holm_sidak(*diameters)
        assert repr(res) == (
            "HolmSidakSolution(k=4, df=27, n_comparisons=6, n_rejected=2)"
        )

    def test_is_solution(self, diameters):
        assert isinstance(holm_sidak(*diameters), HolmSidakSolution)


class TestSummary:

    def test_tables(self, diameters):
        text = holm_sidak(*diameters).summary()
        assert 'Holm-Sidak' in text
        assert 'Degrees of freedom: 27 - Combined variance: 0.0022' in text
        assert '7.7843' in text
        assert 'Reject H0' in text
        assert 'Fail to reject H0' in text
        assert 'No comparison made' in text
        assert 'H0 is accepted' in text

    def test_row_order(self, diameters):
        text = holm_sidak(*diameters).summary()
        assert text.index('1-4') < text.index('1-3') < text.index('3-4')

    def test_control_title(self, diameters):
        text = holm_sidak(*diameters, control=True).summary()
        assert 'control: group 1' in text
        assert 'No comparison made' not in text

    def test_warnings_listed(self):
        with pytest.warns(RuntimeWarning):
            res = holm_sidak([1.0, 1.0], [2.0, 2.0])
        assert 'Warning: pooled variance is zero' in res.summary()
