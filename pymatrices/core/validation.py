"""
Input validation utilities for pymatrices.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion beyond reading numbers as decimals
    - No negative (wrap-around) indices: Python's list semantics would hide
      off-by-one errors in row/column arithmetic
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
"""

from decimal import Decimal
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pymatrices.core.compute.decimal_ops import to_decimal
from pymatrices.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ValidationError,
)


def check_index(index: int, size: int, axis: str) -> int:
    """
    Verify 0 <= index < size.

    Args:
        index: Index to check
        size: Number of valid positions
        axis: 'row', 'column' or 'element', for error messages

    Returns:
        The index as an int

    Raises:
        MatrixIndexError: If index is not an integer or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise MatrixIndexError(
            f"{axis} index must be an integer, got {type(index).__name__}",
            index=index, size=size, axis=axis,
        )
    index = int(index)
    if index < 0 or index >= size:
        raise MatrixIndexError(
            f"{axis} index {index} out of range for size {size}",
            index=index, size=size, axis=axis,
        )
    return index


def check_positive_dimension(dimension: int, name: str) -> int:
    """
    Verify a dimension is an integer >= 1.

    Args:
        dimension: Value to check
        name: Parameter name for error messages

    Returns:
        The dimension as an int

    Raises:
        ValidationError: If dimension is not an integer or is < 1
    """
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise ValidationError(
            f"{name}: must be an integer, got {type(dimension).__name__}"
        )
    if dimension < 1:
        raise ValidationError(f"{name}: must be greater than 0, got {dimension}")
    return int(dimension)


def check_real_number(value: Any, position: int | None = None) -> Decimal:
    """
    Validate one element and convert it to Decimal.

    Raises:
        InvalidElementError: If value is None, bool, non-numeric or non-finite
    """
    return to_decimal(value, position=position)


def check_row(row: Any, name: str = "row") -> list[Any]:
    """
    Verify row is a flat sequence and return it as a list.

    Strings and mappings are rejected even though they are iterable. 1D numpy
    arrays are accepted.

    Raises:
        ValidationError: If row is not a sequence
        DimensionError: If row is a numpy array with ndim != 1
    """
    if isinstance(row, np.ndarray):
        if row.ndim != 1:
            raise DimensionError(
                f"{name}: expected 1D array, got {row.ndim}D with shape {row.shape}"
            )
        return row.tolist()
    if isinstance(row, (str, bytes, dict, set)) or not hasattr(row, '__iter__'):
        raise ValidationError(
            f"{name}: expected a sequence of numbers, got {type(row).__name__}"
        )
    return list(row)


def check_numeric_row(row: Any, name: str = "row") -> list[Decimal]:
    """
    Validate a row for a numeric container and convert every cell to Decimal.

    Raises:
        ValidationError: If row is not a sequence
        InvalidElementError: If any cell is None or not a real number
    """
    return [check_real_number(value, position=i)
            for i, value in enumerate(check_row(row, name))]


def check_array_2d(array: ArrayLike, name: str) -> np.ndarray:
    """
    Validate and convert input to a 2D numeric numpy array.

    Mirrors the numeric-dtype rules of numpy interop: object and non-numeric
    dtypes are rejected, integers are kept (they convert exactly).

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If the array is not 2D
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged rows or empty cells"
        )
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}"
        )
    return result
