"""
Input validation utilities for PyMatrices.

These validators guard the only boundary where dimensions are not fixed by
type: converting an array-like into a Vector<N> or Matrix<N>. They follow the
"fail fast, fail loud" principle and raise immediately with clear error
messages rather than silently reshaping or truncating.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrices.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return np.array(result, dtype=np.float64)


def check_shape(
    array: NDArray[np.floating[Any]],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has exactly the specified shape.

    Args:
        array: Array to check
        shape: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has the wrong shape
    """
    if array.shape != shape:
        raise DimensionError(
            f"{name}: expected shape {shape}, got {array.shape}"
        )


def check_finite(array: ArrayLike, name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    The library propagates NaN/Inf through arithmetic without checking.
    Callers that must exclude them validate here, e.g.
    ``check_finite(m.to_array(), "m")``.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    array = np.asarray(array, dtype=np.float64)
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
