"""
holmsidak: Holm-Sidak stepdown procedure for multiple Student's t-tests.

Pairwise comparisons among K independent groups on a pooled variance,
with familywise error control by Sidak-adjusted thresholds, optionally
against a single control group.

Submodules:
    stepdown: the procedure (holm_sidak, holm_sidak_grouped)
    core: exceptions, result envelope, validation
"""

__version__ = "0.1.0"

from holmsidak import stepdown
from holmsidak.stepdown import (
    holm_sidak,
    holm_sidak_grouped,
    holm_sidak_adjust,
    sidak_alphas,
)

__all__ = [
    "__version__",
    "stepdown",
    "holm_sidak",
    "holm_sidak_grouped",
    "holm_sidak_adjust",
    "sidak_alphas",
]
