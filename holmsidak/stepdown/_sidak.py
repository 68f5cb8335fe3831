"""
Holm-Sidak stepdown correction.

Comparisons are tested in ascending p order against

    alpha_j = 1 - (1 - alpha) ** (1 / (c - j + 1)),   j = 1..c

The first comparison with p >= alpha_j fails to reject and ends testing;
every comparison after it is not evaluated.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from holmsidak.core.validation import check_alpha
from holmsidak.stepdown._common import (
    Comparison,
    FAIL_TO_REJECT,
    NOT_EVALUATED,
    REJECT,
)
from holmsidak.stepdown._comparisons import RawComparison


def sidak_alphas(c: int, alpha: float) -> NDArray[np.floating]:
    """
    Sidak thresholds for ranks 1..c.

    Non-decreasing in rank; the last one equals alpha (up to rounding).
    """
    if c < 1:
        raise ValueError(f"c must be >= 1, got {c}")
    alpha = check_alpha(alpha)
    remaining = np.arange(c, 0, -1, dtype=np.float64)   # c - j + 1
    return 1.0 - (1.0 - alpha) ** (1.0 / remaining)


def stepdown_order(p_values: ArrayLike) -> NDArray[np.intp]:
    """Ascending p order; ties keep their original order."""
    return np.argsort(np.asarray(p_values, dtype=np.float64), kind='stable')


def holm_sidak_stepdown(
    comparisons: Sequence[RawComparison],
    alpha: float,
) -> tuple[Comparison, ...]:
    """
    Sort comparisons by p and apply the stop-on-first-failure rule.

    Args:
        comparisons: Comparisons in generation order
        alpha: Familywise significance level

    Returns:
        Comparisons in ascending p order with rank, adjusted alpha and
        decision filled in
    """
    c = len(comparisons)
    if c == 0:
        return ()

    order = stepdown_order([cmp.p_value for cmp in comparisons])
    thresholds = sidak_alphas(c, alpha)

    result: list[Comparison] = []
    comparing = True
    for rank, idx in enumerate(order, start=1):
        raw = comparisons[idx]
        if comparing:
            threshold = float(thresholds[rank - 1])
            if raw.p_value < threshold:
                decision = REJECT
            else:
                decision = FAIL_TO_REJECT
                comparing = False
            adjusted = threshold
        else:
            decision = NOT_EVALUATED
            adjusted = None

        result.append(Comparison(
            group1=raw.group1,
            group2=raw.group2,
            label=raw.label,
            diff=raw.diff,
            se=raw.se,
            t_statistic=raw.t_statistic,
            p_value=raw.p_value,
            rank=rank,
            adjusted_alpha=adjusted,
            decision=decision,
        ))

    return tuple(result)


def holm_sidak_adjust(p: ArrayLike) -> NDArray[np.floating]:
    """
    Holm-Sidak adjusted p-values, in input order.

    For sorted p-values p_(1) <= ... <= p_(c):

        q_(j) = max_{k <= j} 1 - (1 - p_(k)) ** (c - k + 1)

    A comparison is rejected at level alpha by the stepdown exactly when
    its adjusted p-value is below alpha.

    Parameters
    ----------
    p : array-like
        Raw p-values in [0, 1].

    Returns
    -------
    ndarray
        Adjusted p-values, same length as input, clipped to [0, 1].
    """
    p_arr = np.asarray(p, dtype=np.float64).ravel()
    c = len(p_arr)
    if c == 0:
        return np.array([], dtype=np.float64)
    if np.any(np.isnan(p_arr)) or np.any((p_arr < 0.0) | (p_arr > 1.0)):
        raise ValueError("p-values must lie in [0, 1] and contain no NaN")

    order = stepdown_order(p_arr)
    sorted_p = p_arr[order]

    exponents = np.arange(c, 0, -1, dtype=np.float64)
    adjusted_sorted = 1.0 - (1.0 - sorted_p) ** exponents

    # Enforce monotonicity (cumulative max)
    adjusted_sorted = np.maximum.accumulate(adjusted_sorted)

    result = np.empty(c, dtype=np.float64)
    result[order] = np.clip(adjusted_sorted, 0.0, 1.0)
    return result
