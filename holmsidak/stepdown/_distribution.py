"""
Student's t CDF providers.

The comparison builder only ever sees a plain callable `cdf(t, df)`.
`resolve_t_cdf` turns whatever the caller injected (nothing, a function,
or an object satisfying the TDistribution protocol) into that callable.
"""

from __future__ import annotations

from typing import Any, Callable

from scipy import stats as sp_stats

from holmsidak.core.exceptions import ConfigurationError
from holmsidak.core.protocols import TDistribution


TCdf = Callable[[float, float], float]


class ScipyTDistribution:
    """Default t CDF backed by scipy.stats.t."""

    @property
    def name(self) -> str:
        return 'scipy'

    def cdf(self, t: float, df: float) -> float:
        return float(sp_stats.t.cdf(t, df))


def resolve_t_cdf(t_cdf: Any) -> tuple[TCdf, str]:
    """
    Normalize an injected t CDF.

    Args:
        t_cdf: None (use scipy), a callable (t, df) -> float, or an object
            with a cdf(t, df) method

    Returns:
        (callable, name) where name identifies the provider in result info

    Raises:
        ConfigurationError: If t_cdf is neither callable nor a TDistribution
    """
    if t_cdf is None:
        dist = ScipyTDistribution()
        return dist.cdf, dist.name
    if isinstance(t_cdf, TDistribution):
        return t_cdf.cdf, getattr(t_cdf, 'name', type(t_cdf).__name__)
    if callable(t_cdf):
        return t_cdf, getattr(t_cdf, '__name__', type(t_cdf).__name__)
    raise ConfigurationError(
        f"t_cdf must be callable or provide a cdf(t, df) method, "
        f"got {type(t_cdf).__name__}",
        option="t_cdf", value=t_cdf,
    )
