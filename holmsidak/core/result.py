"""
Generic result container for holmsidak computations.

Every backend returns a Result envelope around its parameter payload so the
solution layer can expose timing, diagnostics and warnings uniformly.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (counts, tail, control mode)
    - timing is optional so unit tests can build results by hand
    - Immutable (frozen=True); two identical calls give equal payloads
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Payload produced by the backend (e.g. HolmSidakParams)
        info: Structured metadata such as {'n_comparisons': 6, 'n_rejected': 2}
        timing: Per-stage execution timing, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=params,
        ...     info={'n_comparisons': 3, 'n_rejected': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_holm_sidak'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
