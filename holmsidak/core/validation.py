"""
Input validation utilities for holmsidak.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from holmsidak.core.exceptions import (
    ConfigurationError,
    DimensionError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types or ragged
    sequences) and non-numeric dtypes such as strings. Booleans are
    rejected as well since they are not measurements.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[Any], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_integer_labels(array: NDArray[Any], name: str) -> NDArray[np.int64]:
    """
    Verify a grouping vector holds integer-valued labels.

    Float arrays are accepted when every element is a whole number
    (e.g. [1.0, 1.0, 2.0]).

    Returns:
        The labels as an int64 array

    Raises:
        ValidationError: If any label is non-numeric, non-finite or fractional
    """
    labels = check_array(array, name)
    check_finite(labels, name)
    if not np.all(labels == np.round(labels)):
        raise ValidationError(f"{name}: group labels must be integers")
    return labels.astype(np.int64)


def check_alpha(alpha: Any) -> float:
    """
    Verify alpha is a real number strictly between 0 and 1.

    Returns:
        alpha as a Python float

    Raises:
        ConfigurationError: If alpha is not a real number in (0, 1)
    """
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise ConfigurationError(
            f"alpha must be a real number, got {type(alpha).__name__}",
            option="alpha", value=alpha,
        )
    alpha = float(alpha)
    if not (0.0 < alpha < 1.0):
        raise ConfigurationError(
            f"alpha must be in (0, 1), got {alpha}",
            option="alpha", value=alpha,
        )
    return alpha
