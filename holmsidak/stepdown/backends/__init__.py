"""Backends for the Holm-Sidak procedure."""

from holmsidak.stepdown.backends.cpu import CPUHolmSidakBackend

__all__ = ["CPUHolmSidakBackend"]
