"""Computation helpers shared across holmsidak modules."""

from holmsidak.core.compute.timing import Timer

__all__ = ["Timer"]
