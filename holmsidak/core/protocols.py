"""
Core protocols for holmsidak.

Structural interfaces (typing.Protocol) rather than ABCs, so any object
with the right shape can be plugged in without inheriting from us.

    TDistribution: the Student's t CDF consumed by the comparison builder
    Backend: turns a validated design into a Result envelope
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class TDistribution(Protocol):
    """
    Student's t cumulative distribution function.

    Implementations must be pure and synchronous. They are never called
    with a non-finite t; the comparison builder resolves the infinite
    limits itself.
    """

    def cdf(self, t: float, df: float) -> float:
        """Return P(T <= t) for T ~ t(df)."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Backends are stateless: everything they need arrives in the design
    or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_holm_sidak'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            DegenerateDesignError: If pooled degrees of freedom are not positive
            ValidationError: If design is invalid for this backend
        """
        ...
