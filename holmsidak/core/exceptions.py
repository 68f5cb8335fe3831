"""
Exception hierarchy for holmsidak.

All exceptions inherit from HolmSidakError so callers can catch any
library-specific failure with a single except clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the parameter and the actual value
    - Nothing is recovered internally; no partial results are returned
"""


class HolmSidakError(Exception):
    """Base exception for all holmsidak errors."""
    pass


class ValidationError(HolmSidakError):
    """
    Input data failed validation.

    Raised for fewer than two groups, empty groups, non-numeric or
    non-finite observations, and malformed grouping vectors.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a group is not one-dimensional or when a flat data vector
    and its grouping vector differ in length.
    """
    pass


class ConfigurationError(HolmSidakError):
    """
    A procedure option is invalid.

    Raised for alpha outside (0, 1), an unrecognized tail, a control flag
    that is not a genuine bool, or a t CDF that cannot be called.

    Attributes:
        option: Name of the offending option
        value: The value that was supplied
    """

    def __init__(self, message: str, option: str | None = None, value: object = None):
        super().__init__(message)
        self.option = option
        self.value = value


class NumericalError(HolmSidakError):
    """
    Numerical computation is impossible for the given data.

    Base class for errors arising after validation succeeded.
    """
    pass


class DegenerateDesignError(NumericalError):
    """
    Pooled degrees of freedom are not positive.

    Happens when the total number of observations does not exceed the
    number of groups, e.g. every group holds a single observation.

    Attributes:
        df: Degrees of freedom that were computed (n_total - n_groups)
        n_total: Total number of observations
        n_groups: Number of groups
    """

    def __init__(
        self,
        message: str,
        df: int | None = None,
        n_total: int | None = None,
        n_groups: int | None = None,
    ):
        super().__init__(message)
        self.df = df
        self.n_total = n_total
        self.n_groups = n_groups
