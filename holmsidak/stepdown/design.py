"""
Holm-Sidak design object.

Wraps validated samples and procedure options. Factory methods handle the
two input shapes: one sequence per group, or a flat data vector with a
parallel vector of integer group labels.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from holmsidak.core.validation import (
    check_alpha,
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_integer_labels,
    check_min_samples,
)
from holmsidak.core.exceptions import ConfigurationError, ValidationError
from holmsidak.stepdown._common import DEFAULT_ALPHA, DEFAULT_TAIL, VALID_TAILS


def _validate_tail(tail: Any) -> str:
    """Validate and return the tail name."""
    if not isinstance(tail, str) or tail not in VALID_TAILS:
        raise ConfigurationError(
            f"tail must be one of {VALID_TAILS}, got {tail!r}",
            option="tail", value=tail,
        )
    return tail


def _validate_control(control: Any) -> bool:
    """Only genuine bools are accepted; see _flags.as_bool for spellings."""
    if not isinstance(control, (bool, np.bool_)):
        raise ConfigurationError(
            f"control must be a bool, got {type(control).__name__}",
            option="control", value=control,
        )
    return bool(control)


@dataclass(frozen=True)
class HolmSidakDesign:
    """
    Validated data container for the Holm-Sidak procedure.

    Created via factory methods, not directly.
    """
    samples: tuple[NDArray[np.floating[Any]], ...]
    labels: tuple[str, ...]
    alpha: float
    tail: str
    control: bool

    @property
    def n_groups(self) -> int:
        return len(self.samples)

    @property
    def n_observations(self) -> int:
        return int(sum(len(s) for s in self.samples))

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n_groups': self.n_groups,
            'n_total': self.n_observations,
            'sizes': [len(s) for s in self.samples],
            'alpha': self.alpha,
            'tail': self.tail,
            'control': self.control,
        }

    @staticmethod
    def for_groups(
        groups: Sequence[Any],
        *,
        labels: Sequence[Any] | None = None,
        control: bool = False,
        alpha: float = DEFAULT_ALPHA,
        tail: str = DEFAULT_TAIL,
    ) -> 'HolmSidakDesign':
        """
        Create a design from one sequence of observations per group.

        Args:
            groups: K >= 2 one-dimensional numeric sequences, in the order
                that defines group indices 1..K
            labels: Optional names for the groups (default "1".."K")
            control: Compare group 1 against every other group only
            alpha: Familywise significance level in (0, 1)
            tail: "two.sided", "less" or "greater"

        Returns:
            HolmSidakDesign
        """
        alpha = check_alpha(alpha)
        tail = _validate_tail(tail)
        control = _validate_control(control)

        groups = list(groups)
        if len(groups) < 2:
            raise ValidationError(
                f"groups: need at least 2 groups, got {len(groups)}"
            )

        samples = []
        for i, g in enumerate(groups, start=1):
            name = f"group {i}"
            arr = check_array(g, name)
            check_1d(arr, name)
            check_min_samples(arr, 1, name)
            check_finite(arr, name)
            samples.append(arr)

        if labels is None:
            label_strs = tuple(str(i) for i in range(1, len(samples) + 1))
        else:
            label_strs = tuple(str(lab) for lab in labels)
            if len(label_strs) != len(samples):
                raise ValidationError(
                    f"labels: expected {len(samples)} labels, got {len(label_strs)}"
                )

        return HolmSidakDesign(
            samples=tuple(samples),
            labels=label_strs,
            alpha=alpha,
            tail=tail,
            control=control,
        )

    @staticmethod
    def for_grouped(
        x: Any,
        g: Any,
        *,
        control: bool = False,
        alpha: float = DEFAULT_ALPHA,
        tail: str = DEFAULT_TAIL,
    ) -> 'HolmSidakDesign':
        """
        Create a design from a flat data vector and a grouping vector.

        Groups are ordered by ascending label value, so the smallest label
        becomes group 1 (the control when control=True). Each group keeps
        its observations in their original order.

        Args:
            x: 1D numeric data
            g: 1D integer group labels, same length as x

        Returns:
            HolmSidakDesign
        """
        x_arr = check_array(x, "x")
        check_1d(x_arr, "x")
        check_min_samples(x_arr, 1, "x")
        check_finite(x_arr, "x")

        g_arr = check_integer_labels(g, "g")
        check_1d(g_arr, "g")
        check_consistent_length(x_arr, g_arr, names=("x", "g"))

        levels = np.unique(g_arr)
        return HolmSidakDesign.for_groups(
            [x_arr[g_arr == level] for level in levels],
            labels=[int(level) for level in levels],
            control=control,
            alpha=alpha,
            tail=tail,
        )
