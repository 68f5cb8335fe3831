"""
Holm-Sidak stepdown multiple comparisons.

Public API:
    holm_sidak(*groups, ...) -> HolmSidakSolution
    holm_sidak_grouped(x, g, ...) -> HolmSidakSolution
    holm_sidak_adjust(p) -> adjusted p-values
    sidak_alphas(c, alpha) -> per-rank thresholds
"""

from holmsidak.stepdown.solvers import holm_sidak, holm_sidak_grouped
from holmsidak.stepdown.solution import HolmSidakSolution
from holmsidak.stepdown.design import HolmSidakDesign
from holmsidak.stepdown._common import (
    Comparison,
    GroupSummary,
    HolmSidakParams,
    REJECT,
    FAIL_TO_REJECT,
    NOT_EVALUATED,
)
from holmsidak.stepdown._sidak import holm_sidak_adjust, sidak_alphas
from holmsidak.stepdown._distribution import ScipyTDistribution
from holmsidak.stepdown._flags import as_bool, as_tail

__all__ = [
    "holm_sidak",
    "holm_sidak_grouped",
    "holm_sidak_adjust",
    "sidak_alphas",
    "HolmSidakSolution",
    "HolmSidakDesign",
    "HolmSidakParams",
    "GroupSummary",
    "Comparison",
    "REJECT",
    "FAIL_TO_REJECT",
    "NOT_EVALUATED",
    "ScipyTDistribution",
    "as_bool",
    "as_tail",
]
