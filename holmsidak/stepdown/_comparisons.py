"""
Pairwise Student's t comparisons on the pooled variance.

For a pair (i, j):

    t = (M_i - M_j) / sqrt(S^2 * (1/N_i + 1/N_j))

and with F the t CDF at the pooled degrees of freedom:

    two.sided:  p = 2 * F(-|t|)
    less:       p = F(t)
    greater:    p = F(-t)
"""

import math
from dataclasses import dataclass
from typing import Sequence

from holmsidak.core.exceptions import ConfigurationError
from holmsidak.stepdown._common import GroupSummary
from holmsidak.stepdown._distribution import TCdf


@dataclass(frozen=True)
class RawComparison:
    """A comparison before the stepdown pass assigns rank and decision."""
    group1: int
    group2: int
    label: str
    diff: float
    se: float
    t_statistic: float
    p_value: float


def comparison_pairs(k: int, control: bool) -> list[tuple[int, int]]:
    """
    1-based (i, j) pairs in generation order.

    control=False: all i < j, lexicographic, k*(k-1)/2 pairs.
    control=True: (1, j) for j = 2..k, k-1 pairs.
    """
    if control:
        return [(1, j) for j in range(2, k + 1)]
    return [(i, j) for i in range(1, k) for j in range(i + 1, k + 1)]


def _cdf(t_cdf: TCdf, t: float, df: float) -> float:
    # Infinite t (zero pooled variance) uses the CDF limits directly.
    if math.isinf(t):
        return 1.0 if t > 0 else 0.0
    value = float(t_cdf(t, df))
    if not math.isfinite(value):
        raise ConfigurationError(
            f"t_cdf returned {value} for t={t}, df={df}; expected a probability",
            option="t_cdf", value=value,
        )
    return value


def t_pvalue(t: float, df: float, tail: str, t_cdf: TCdf) -> float:
    """
    p-value of a t statistic for the given tail, clipped to [0, 1].

    A NaN t (0/0) gives p = 1. A t_cdf that returns NaN or Inf raises
    ConfigurationError; its output never reaches the stepdown.
    """
    if math.isnan(t):
        # 0/0: equal means with no within-group spread
        return 1.0
    if tail == "two.sided":
        p = 2.0 * _cdf(t_cdf, -abs(t), df)
    elif tail == "less":
        p = _cdf(t_cdf, t, df)
    elif tail == "greater":
        p = _cdf(t_cdf, -t, df)
    else:
        raise ValueError(f"Unknown tail: {tail!r}")
    return min(max(p, 0.0), 1.0)


def build_comparisons(
    groups: Sequence[GroupSummary],
    s2: float,
    df: int,
    *,
    control: bool,
    tail: str,
    t_cdf: TCdf,
) -> tuple[list[RawComparison], list[str]]:
    """
    Compute t and p for every required pair, in generation order.

    Returns:
        (comparisons, warnings)
    """
    warnings_list: list[str] = []
    comparisons: list[RawComparison] = []

    for i, j in comparison_pairs(len(groups), control):
        gi, gj = groups[i - 1], groups[j - 1]
        diff = gi.mean - gj.mean
        se = math.sqrt(s2 * (1.0 / gi.n + 1.0 / gj.n))

        if se > 0.0:
            t_stat = diff / se
        elif diff != 0.0:
            t_stat = math.copysign(math.inf, diff)
        else:
            t_stat = math.nan
            warnings_list.append(
                f"comparison {i}-{j}: equal means and zero pooled variance, "
                f"t is undefined and p is set to 1"
            )

        comparisons.append(RawComparison(
            group1=i,
            group2=j,
            label=f"{i}-{j}",
            diff=diff,
            se=se,
            t_statistic=t_stat,
            p_value=t_pvalue(t_stat, df, tail, t_cdf),
        ))

    return comparisons, warnings_list
