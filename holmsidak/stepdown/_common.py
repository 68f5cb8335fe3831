"""
Common data types for the Holm-Sidak procedure.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container: no methods, no computation.
"""

from dataclasses import dataclass


VALID_TAILS = ("two.sided", "less", "greater")

DEFAULT_ALPHA = 0.05
DEFAULT_TAIL = "two.sided"

# Comparison decisions
REJECT = "reject"
FAIL_TO_REJECT = "fail_to_reject"
NOT_EVALUATED = "not_evaluated"
DECISIONS = (REJECT, FAIL_TO_REJECT, NOT_EVALUATED)


@dataclass(frozen=True)
class GroupSummary:
    """Summary statistics of one input sample."""
    index: int          # 1-based, input order
    label: str
    n: int
    mean: float
    std_dev: float      # Bessel-corrected; 0.0 for a single observation


@dataclass(frozen=True)
class Comparison:
    """One pairwise comparison and its stepdown outcome."""
    group1: int
    group2: int
    label: str                       # "i-j"
    diff: float                      # mean(group1) - mean(group2)
    se: float
    t_statistic: float
    p_value: float
    rank: int                        # 1-based position in ascending p order
    adjusted_alpha: float | None     # None: no comparison made
    decision: str                    # one of DECISIONS


@dataclass(frozen=True)
class HolmSidakParams:
    """
    Parameter payload for the Holm-Sidak procedure.

    comparisons are ordered by ascending p-value, not by group pair.
    """
    groups: tuple[GroupSummary, ...]
    n_total: int
    df: int
    pooled_variance: float
    comparisons: tuple[Comparison, ...]
    alpha: float
    tail: str
    control: bool
