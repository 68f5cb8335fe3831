"""
User-facing Holm-Sidak solution.

HolmSidakSolution wraps Result[HolmSidakParams], exposes the payload as
properties and renders the group and comparison tables via summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np

from holmsidak.core.result import Result
from holmsidak.stepdown._common import (
    Comparison,
    FAIL_TO_REJECT,
    GroupSummary,
    HolmSidakParams,
    REJECT,
)

if TYPE_CHECKING:
    from holmsidak.stepdown.design import HolmSidakDesign


_COMMENTS = {
    REJECT: "Reject H0",
    FAIL_TO_REJECT: "Fail to reject H0",
}
_NOT_EVALUATED_COMMENT = "H0 is accepted"
_NO_COMPARISON = "No comparison made"

_TAIL_NAMES = {
    'two.sided': "two-tailed",
    'less': "left-tailed",
    'greater': "right-tailed",
}


@dataclass
class HolmSidakSolution:
    """
    User-facing result of the Holm-Sidak procedure.

    Produced by holm_sidak() and holm_sidak_grouped().
    """
    _result: Result[HolmSidakParams]
    _design: 'HolmSidakDesign | None' = None

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        """Group summaries in input order."""
        return self._result.params.groups

    @property
    def comparisons(self) -> tuple[Comparison, ...]:
        """Comparisons in ascending p-value order."""
        return self._result.params.comparisons

    @property
    def n_total(self) -> int:
        return self._result.params.n_total

    @property
    def df(self) -> int:
        """Pooled degrees of freedom (N_total - K)."""
        return self._result.params.df

    @property
    def pooled_variance(self) -> float:
        return self._result.params.pooled_variance

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def tail(self) -> str:
        return self._result.params.tail

    @property
    def control(self) -> bool:
        return self._result.params.control

    @property
    def p_values(self) -> np.ndarray:
        """Raw p-values, ascending."""
        return np.array([c.p_value for c in self.comparisons], dtype=np.float64)

    @property
    def rejected(self) -> tuple[Comparison, ...]:
        """Comparisons whose null hypothesis was rejected."""
        return tuple(c for c in self.comparisons if c.decision == REJECT)

    def comparison(self, label: str) -> Comparison:
        """Look up a comparison by its "i-j" label."""
        for c in self.comparisons:
            if c.label == label:
                return c
        raise KeyError(
            f"No comparison {label!r}. "
            f"Available: {[c.label for c in self.comparisons]}"
        )

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format the group table and the stepdown table.

        Produces output like:

            Group  N       Mean  Standard deviation
            1      8     7.7138            0.026152
            ...
            Degrees of freedom: 27 - Combined variance: 0.0022

            Comparison     p-value         Sidak alpha  Comment
            1-4           0.001314              0.0085  Reject H0
            ...
        """
        width = 72
        title = "Holm-Sidak multiple comparisons"
        if self.control:
            title += f" (control: group {self.groups[0].label})"

        lines = [
            title,
            "=" * width,
            f"alpha = {self.alpha:g}, {_TAIL_NAMES.get(self.tail, self.tail)}",
            "",
            f"{'Group':<12} {'N':>5} {'Mean':>12} {'Standard deviation':>20}",
            "-" * width,
        ]
        for g in self.groups:
            lines.append(
                f"{g.label:<12} {g.n:>5d} {g.mean:>12.4f} {g.std_dev:>20.6f}"
            )

        lines.append("")
        lines.append(
            f"Degrees of freedom: {self.df} - "
            f"Combined variance: {self.pooled_variance:.4f}"
        )
        lines.append("")

        lines.append(
            f"{'Comparison':<12} {'p-value':>12} {'Sidak alpha':>20}  Comment"
        )
        lines.append("-" * width)
        for c in self.comparisons:
            if c.adjusted_alpha is None:
                alpha_str = _NO_COMPARISON
                comment = _NOT_EVALUATED_COMMENT
            else:
                alpha_str = f"{c.adjusted_alpha:.4f}"
                comment = _COMMENTS[c.decision]
            lines.append(
                f"{c.label:<12} {_format_pvalue(c.p_value):>12} "
                f"{alpha_str:>20}  {comment}"
            )
        lines.append("-" * width)

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"HolmSidakSolution(k={len(self.groups)}, df={self.df}, "
            f"n_comparisons={len(self.comparisons)}, "
            f"n_rejected={len(self.rejected)})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like the comparison table expects."""
    if p == 0.0:
        return "0"
    if p < 1e-4:
        return f"{p:.4e}"
    return f"{p:.5g}"
