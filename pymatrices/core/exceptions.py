"""
Exception hierarchy for pymatrices.

All exceptions inherit from PyMatricesError to allow catching any
library-specific error. Shape problems live under DimensionError so callers
can catch every size mismatch with one clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyMatricesError(Exception):
    """Base exception for all pymatrices errors."""
    pass


class ValidationError(PyMatricesError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.
    """
    pass


class InvalidElementError(ValidationError):
    """
    A numeric container was given something that is not a real number.

    Raised for empty (None) cells, booleans, strings, NaN and infinities.

    Attributes:
        value: The rejected value
        position: Index of the value inside its row, if known
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        position: int | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.position = position


class MatrixIndexError(ValidationError, IndexError):
    """
    A row, column or element index is out of range.

    Attributes:
        index: The offending index
        size: Number of valid positions along the axis
        axis: 'row', 'column' or 'element'
    """

    def __init__(self, message: str, index: int, size: int, axis: str):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class IrregularMatrixRowsError(DimensionError, IndexError):
    """
    A column-wise operation hit a row that is too short.

    Attributes:
        index: Index of the first row lacking the requested column
        column: The requested column index
    """

    def __init__(self, message: str, index: int, column: int | None = None):
        super().__init__(message)
        self.index = index
        self.column = column


class IncompatibleVectorSizeError(DimensionError):
    """
    Two vectors that must share a length do not.

    Attributes:
        expected: Required length
        actual: Length received
    """

    def __init__(
        self,
        message: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        if message is None:
            message = (
                f"Expected vector size of {expected}, "
                f"but received a vector of size {actual}."
            )
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IncompatibleRowSizeError(IncompatibleVectorSizeError):
    """
    A row's length does not match a fixed-dimension matrix.

    Attributes:
        expected: The matrix's dimension limit (None if not yet fixed)
        actual: Length of the rejected row
    """

    def __init__(
        self,
        message: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        if message is None:
            message = (
                f"Expected row size of {expected}, "
                f"but received a row of size {actual}."
            )
        super().__init__(message, expected=expected, actual=actual)


class IncompatibleMatrixDimensionError(IncompatibleRowSizeError):
    """
    Two matrices have shapes unsuitable for the requested operation.

    For multiplication, expected is the left operand's dimension limit and
    actual is the right operand's row count.
    """

    def __init__(
        self,
        message: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        if message is None:
            message = (
                f"Expected a matrix with {expected} rows, "
                f"but received one with {actual} rows."
            )
        super().__init__(message, expected=expected, actual=actual)


class NonSquareMatrixError(IncompatibleMatrixDimensionError):
    """
    An operation requiring a square matrix received a non-square one.

    Attributes:
        n_rows: Row count of the offending matrix
        n_columns: Column count (dimension limit) of the offending matrix
    """

    def __init__(self, n_rows: int, n_columns: int | None):
        super().__init__(
            f"Expected a square matrix, but received a matrix of "
            f"dimension {n_rows} x {n_columns}.",
            expected=n_columns,
            actual=n_rows,
        )
        self.n_rows = n_rows
        self.n_columns = n_columns


class UnsupportedOperationError(PyMatricesError):
    """
    The operation is not defined for these operands.

    Raised for cross products of vectors that are not 3-dimensional and for
    element removal on fixed-dimension matrices.

    Attributes:
        operation: Name of the rejected operation
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
