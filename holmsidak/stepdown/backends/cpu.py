"""
CPU reference backend for the Holm-Sidak procedure.

Runs the pipeline summarize -> pool -> compare -> stepdown and assembles
the Result envelope. Stateless: one backend instance can serve any number
of concurrent solves.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

from holmsidak.core.result import Result
from holmsidak.core.compute.timing import Timer
from holmsidak.stepdown._common import HolmSidakParams, REJECT
from holmsidak.stepdown._comparisons import build_comparisons
from holmsidak.stepdown._distribution import resolve_t_cdf
from holmsidak.stepdown._sidak import holm_sidak_stepdown
from holmsidak.stepdown._summary import pooled_variance, summarize_groups
from holmsidak.stepdown.design import HolmSidakDesign

log = logging.getLogger(__name__)


class CPUHolmSidakBackend:
    """
    CPU reference backend.

    Args:
        t_cdf: None for scipy.stats.t, a callable (t, df) -> float, or an
            object with a cdf(t, df) method
    """

    def __init__(self, t_cdf: Any = None):
        self._t_cdf, self._t_cdf_name = resolve_t_cdf(t_cdf)

    @property
    def name(self) -> str:
        return 'cpu_holm_sidak'

    def solve(self, design: HolmSidakDesign) -> Result[HolmSidakParams]:
        """Run the full procedure on a validated design."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('summarize'):
            groups = summarize_groups(design.samples, design.labels)
        for g in groups:
            if g.n == 1:
                warnings_list.append(
                    f"group {g.index} has a single observation; "
                    f"its standard deviation is taken as 0"
                )

        with timer.section('pool'):
            n_total, df, s2 = pooled_variance(groups)
        if s2 == 0.0:
            warnings_list.append(
                "pooled variance is zero; t statistics are infinite or undefined"
            )

        with timer.section('compare'):
            raw, compare_warnings = build_comparisons(
                groups, s2, df,
                control=design.control,
                tail=design.tail,
                t_cdf=self._t_cdf,
            )
        warnings_list.extend(compare_warnings)

        with timer.section('stepdown'):
            comparisons = holm_sidak_stepdown(raw, design.alpha)

        timer.stop()

        for msg in warnings_list:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)

        n_rejected = sum(1 for c in comparisons if c.decision == REJECT)
        log.debug(
            "holm-sidak: k=%d df=%d s2=%.6g comparisons=%d rejected=%d",
            len(groups), df, s2, len(comparisons), n_rejected,
        )

        params = HolmSidakParams(
            groups=groups,
            n_total=n_total,
            df=df,
            pooled_variance=s2,
            comparisons=comparisons,
            alpha=design.alpha,
            tail=design.tail,
            control=design.control,
        )

        return Result(
            params=params,
            info={
                'n_groups': len(groups),
                'n_comparisons': len(comparisons),
                'n_rejected': n_rejected,
                'tail': design.tail,
                'control': design.control,
                't_cdf': self._t_cdf_name,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
