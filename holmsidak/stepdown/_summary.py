"""
Group summaries and pooled variance.

summarize_groups:
    Size, mean and Bessel-corrected standard deviation per group.

pooled_variance:
    Within-group variances combined with weights N_i - 1:

        S^2 = sum((N_i - 1) * S_i^2) / (N_total - K)
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from holmsidak.core.exceptions import DegenerateDesignError
from holmsidak.stepdown._common import GroupSummary


def summarize_groups(
    samples: Sequence[NDArray[np.floating[Any]]],
    labels: Sequence[str],
) -> tuple[GroupSummary, ...]:
    """
    Summarize each sample, preserving input order.

    A single-observation group gets std_dev 0.0: it adds nothing to the
    pooled sum of squares and nothing to the degrees of freedom.

    A constant sample keeps its value as the mean and gets std_dev exactly
    0.0; np.mean of repeated non-dyadic values such as 0.1 is off by an ulp.
    """
    summaries = []
    for index, (y, label) in enumerate(zip(samples, labels), start=1):
        n = len(y)
        if np.all(y == y[0]):
            mean = float(y[0])
            std_dev = 0.0
        else:
            mean = float(np.mean(y))
            std_dev = float(np.std(y, ddof=1))
        summaries.append(GroupSummary(
            index=index,
            label=label,
            n=n,
            mean=mean,
            std_dev=std_dev,
        ))
    return tuple(summaries)


def pooled_variance(groups: Sequence[GroupSummary]) -> tuple[int, int, float]:
    """
    Pool the within-group variances.

    Returns:
        (n_total, df, pooled_variance) with df = n_total - K

    Raises:
        DegenerateDesignError: If df <= 0
    """
    sizes = np.array([g.n for g in groups], dtype=np.int64)
    sds = np.array([g.std_dev for g in groups], dtype=np.float64)

    n_total = int(np.sum(sizes))
    k = len(groups)
    df = n_total - k
    if df <= 0:
        raise DegenerateDesignError(
            f"degrees of freedom must be positive: {n_total} observations "
            f"in {k} groups gives df={df}",
            df=df, n_total=n_total, n_groups=k,
        )

    s2 = float(np.sum((sizes - 1) * sds ** 2) / df)
    return n_total, df, s2
