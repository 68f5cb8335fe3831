"""
Solver entry points for the Holm-Sidak procedure.

    holm_sidak(*groups, ...)           one sequence per group
    holm_sidak_grouped(x, g, ...)      flat data plus integer group labels
"""

from __future__ import annotations

from typing import Any, Literal, Sequence

from numpy.typing import ArrayLike

from holmsidak.core.exceptions import ConfigurationError, ValidationError
from holmsidak.stepdown._common import DEFAULT_ALPHA, DEFAULT_TAIL
from holmsidak.stepdown.backends.cpu import CPUHolmSidakBackend
from holmsidak.stepdown.design import HolmSidakDesign
from holmsidak.stepdown.solution import HolmSidakSolution


Tail = Literal["two.sided", "less", "greater"]


def holm_sidak(
    *groups: ArrayLike | HolmSidakDesign,
    labels: Sequence[Any] | None = None,
    control: bool = False,
    alpha: float = DEFAULT_ALPHA,
    tail: Tail = DEFAULT_TAIL,
    t_cdf: Any = None,
) -> HolmSidakSolution:
    """
    Holm-Sidak stepdown procedure for pairwise Student's t-tests.

    All groups share one pooled variance estimate. Comparisons are tested
    in ascending p order against Sidak-adjusted thresholds and testing
    stops at the first non-significant comparison.

    Parameters
    ----------
    *groups : array-like or HolmSidakDesign
        Two or more 1D samples, in the order that defines groups 1..K.
        A single pre-built HolmSidakDesign is also accepted; it carries its
        own labels, control, alpha and tail, so those options must then be
        left at their defaults.
    labels : sequence or None
        Display names for the groups. Default "1".."K".
    control : bool
        If True, group 1 is a control and only 1-j comparisons are made
        (K-1 of them). Otherwise all K(K-1)/2 pairs are compared.
    alpha : float
        Familywise significance level in (0, 1). Default 0.05.
    tail : str
        "two.sided" (default), "less" (mean_i < mean_j) or
        "greater" (mean_i > mean_j) for each pair i-j.
    t_cdf : callable, TDistribution or None
        Student's t CDF, called as t_cdf(t, df). Default scipy.stats.t.cdf.

    Returns
    -------
    HolmSidakSolution
        Group summaries, pooled variance, and comparisons in ascending
        p order with Sidak alphas and decisions.

    Examples
    --------
    >>> res = holm_sidak([7.68, 7.69, 7.70], [7.71, 7.73, 7.74], [7.74, 7.75, 7.77])
    >>> print(res.summary())
    """
    if len(groups) == 1 and isinstance(groups[0], HolmSidakDesign):
        design = groups[0]
        overridden = [
            name for name, changed in (
                ("labels", labels is not None),
                ("control", control is not False),
                ("alpha", alpha != DEFAULT_ALPHA),
                ("tail", tail != DEFAULT_TAIL),
            )
            if changed
        ]
        if overridden:
            raise ConfigurationError(
                f"{', '.join(overridden)}: options cannot be combined with a "
                f"HolmSidakDesign; set them when building the design",
                option=overridden[0],
            )
    else:
        if any(isinstance(g, HolmSidakDesign) for g in groups):
            raise ValidationError(
                "groups: a HolmSidakDesign must be passed on its own"
            )
        design = HolmSidakDesign.for_groups(
            groups,
            labels=labels,
            control=control,
            alpha=alpha,
            tail=tail,
        )

    backend = CPUHolmSidakBackend(t_cdf)
    result = backend.solve(design)
    return HolmSidakSolution(_result=result, _design=design)


def holm_sidak_grouped(
    x: ArrayLike,
    g: ArrayLike,
    *,
    control: bool = False,
    alpha: float = DEFAULT_ALPHA,
    tail: Tail = DEFAULT_TAIL,
    t_cdf: Any = None,
) -> HolmSidakSolution:
    """
    Holm-Sidak procedure on a flat data vector with group labels.

    Parameters
    ----------
    x : array-like
        All observations, 1D.
    g : array-like
        Integer group label for each element of x. Groups are ordered by
        ascending label; the smallest label is the control when
        control=True.

    Other parameters are as for holm_sidak().

    Returns
    -------
    HolmSidakSolution
    """
    design = HolmSidakDesign.for_grouped(
        x, g,
        control=control,
        alpha=alpha,
        tail=tail,
    )
    return holm_sidak(design, t_cdf=t_cdf)
