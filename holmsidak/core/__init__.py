"""
Core infrastructure for holmsidak.

Key components:
    protocols: TDistribution, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from holmsidak.core.protocols import TDistribution, Backend
from holmsidak.core.result import Result
from holmsidak.core.exceptions import (
    HolmSidakError,
    ValidationError,
    DimensionError,
    ConfigurationError,
    NumericalError,
    DegenerateDesignError,
)

__all__ = [
    # Protocols
    "TDistribution",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "HolmSidakError",
    "ValidationError",
    "DimensionError",
    "ConfigurationError",
    "NumericalError",
    "DegenerateDesignError",
]
