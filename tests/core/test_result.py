"""
Tests for the Result envelope.
"""

import dataclasses

import pytest

from holmsidak.core.result import Result


def _result(**kwargs):
    defaults = dict(
        params={'df': 27},
        info={'n_comparisons': 6},
        timing=None,
        backend_name='cpu_holm_sidak',
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResult:

    def test_warnings_default_empty(self):
        assert _result().warnings == ()

    def test_has_warning(self):
        r = _result(warnings=("pooled variance is zero",))
        assert r.has_warning("variance")
        assert not r.has_warning("convergence")

    def test_frozen(self):
        r = _result()
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.backend_name = 'other'
