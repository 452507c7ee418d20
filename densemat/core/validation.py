"""
Input validation utilities for densemat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densemat.core.exceptions import (
    DimensionError,
    InvalidDimensionsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types or non-numeric data) and non-numeric dtypes such as
    strings. Integer and lower-precision float input is promoted to
    float64, the single element type of the library.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64 (may share memory with input)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged rows or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional (a flat row-major buffer)."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer count and return it as a Python int.

    bool is rejected even though it subclasses int.

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_dimensions(rows: Any, columns: Any, context: str) -> tuple[int, int]:
    """
    Verify a requested (rows, columns) shape is made of positive integers.

    Args:
        rows: Requested row count
        columns: Requested column count
        context: Operation name used as the message prefix

    Returns:
        (rows, columns) as Python ints

    Raises:
        ValidationError: If either count is not an integer
        InvalidDimensionsError: If either count is < 1
    """
    rows = check_integer(rows, f"{context}: rows")
    columns = check_integer(columns, f"{context}: columns")
    if rows < 1 or columns < 1:
        raise InvalidDimensionsError(
            f"{context}: matrix dimensions must be > 0, got {rows}x{columns}",
            rows=rows,
            columns=columns,
        )
    return rows, columns
