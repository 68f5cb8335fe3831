"""
Tests for option normalization.
"""

import numpy as np
import pytest

from holmsidak.core.exceptions import ConfigurationError
from holmsidak.stepdown import as_bool, as_tail


class TestAsBool:

    @pytest.mark.parametrize("value", [True, 1, "1", "yes", "Y", "true", "On", " t "])
    def test_true(self, value):
        assert as_bool(value) is True

    @pytest.mark.parametrize("value", [False, 0, "0", "no", "N", "FALSE", "off", "f"])
    def test_false(self, value):
        assert as_bool(value) is False

    def test_numpy_integer(self):
        assert as_bool(np.int64(1)) is True

    @pytest.mark.parametrize("value", [2, -1, "maybe", None, 0.5])
    def test_rejected(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            as_bool(value, "control")
        assert exc_info.value.option == "control"


class TestAsTail:

    @pytest.mark.parametrize("value,expected", [
        ("two.sided", "two.sided"),
        ("Two-Sided", "two.sided"),
        ("both", "two.sided"),
        (2, "two.sided"),
        ("2", "two.sided"),
        ("less", "less"),
        ("left", "less"),
        (-1, "less"),
        ("-1", "less"),
        (-1.0, "less"),
        ("greater", "greater"),
        ("RIGHT", "greater"),
        (1, "greater"),
    ])
    def test_recognized(self, value, expected):
        assert as_tail(value) == expected

    @pytest.mark.parametrize("value", [0, 3, "up", None, True, 1.5])
    def test_rejected(self, value):
        with pytest.raises(ConfigurationError):
            as_tail(value)
