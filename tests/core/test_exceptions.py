"""
Tests for the holmsidak exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via HolmSidakError)
    - Diagnostic attributes on ConfigurationError and DegenerateDesignError
"""

import pytest

from holmsidak.core.exceptions import (
    ConfigurationError,
    DegenerateDesignError,
    DimensionError,
    HolmSidakError,
    NumericalError,
    ValidationError,
)


class TestInheritance:
    """Every exception is catchable via HolmSidakError."""

    def test_validation_error_is_base(self):
        with pytest.raises(HolmSidakError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_configuration_error_is_not_validation_error(self):
        assert not issubclass(ConfigurationError, ValidationError)
        assert issubclass(ConfigurationError, HolmSidakError)

    def test_degenerate_design_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateDesignError("df <= 0")


class TestAttributes:

    def test_degenerate_design_attributes(self):
        e = DegenerateDesignError("df <= 0", df=0, n_total=3, n_groups=3)
        assert e.df == 0
        assert e.n_total == 3
        assert e.n_groups == 3
        assert str(e) == "df <= 0"

    def test_degenerate_design_defaults(self):
        e = DegenerateDesignError("df <= 0")
        assert e.df is None
        assert e.n_total is None
        assert e.n_groups is None

    def test_configuration_error_attributes(self):
        e = ConfigurationError("bad alpha", option="alpha", value=2.0)
        assert e.option == "alpha"
        assert e.value == 2.0
