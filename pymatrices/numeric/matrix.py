"""
NumericMatrix: a fixed-dimension matrix of real numbers.

Every cell is a Decimal; rows are exposed as NumericVectors. Empty cells are
rejected, so a NumericMatrix is always rectangular.

Arithmetic:
    add / subtract      row-wise mat1[i] + alpha * mat2[i] (alpha = +1 / -1)
    multiply            result[i][j] = exact dot(row i, column j)
    determinant         row-echelon reduction with swap counting

Combining operations return new matrices; operands are never mutated. The
methods documented as in place (set_row, remove_row, remove_column,
swap_rows, order_rows, row_echelon_form) mutate this matrix.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.compute import decimal_ops
from pymatrices.core.compute.tolerances import DEFAULT_POLICY, DecimalPolicy
from pymatrices.core.exceptions import (
    IncompatibleMatrixDimensionError,
    NonSquareMatrixError,
    ValidationError,
)
from pymatrices.core.protocols import MatrixLike
from pymatrices.core.validation import (
    check_array_2d,
    check_numeric_row,
    check_positive_dimension,
    check_real_number,
)
from pymatrices.matrix.fixed import FixedDimensionMatrix
from pymatrices.numeric import _echelon
from pymatrices.numeric.vector import NumericVector, _combine, _dot_exact


class NumericMatrix:
    """
    Rectangular matrix of Decimals.

    Construction:
        NumericMatrix()                          # dimension set by first row
        NumericMatrix(dimension=3)               # rows must have length 3
        NumericMatrix.from_rows([[1, 2], [3, 4]])
        NumericMatrix.from_array(np.eye(3))
        NumericMatrix.identity(3)
    """

    def __init__(self, dimension: int | None = None):
        self._grid: FixedDimensionMatrix[Decimal] = FixedDimensionMatrix(dimension)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[Any]],
        dimension: int | None = None,
    ) -> NumericMatrix:
        """
        Build from an iterable of rows, validating each one.

        Raises:
            InvalidElementError: If a row holds a non-real cell
            IncompatibleRowSizeError: If the rows do not share one length
        """
        matrix = cls(dimension)
        for row in rows:
            matrix.add_row(row)
        return matrix

    @classmethod
    def from_array(cls, array: ArrayLike) -> NumericMatrix:
        """
        Build from a 2D numeric array.

        Float cells are read through their repr, integer cells exactly.

        Raises:
            ValidationError: If the array is not numeric or has no columns
            DimensionError: If the array is not 2D
        """
        data = check_array_2d(array, "array")
        matrix = cls(check_positive_dimension(data.shape[1], "array columns"))
        for row in data.tolist():
            matrix.add_row(row)
        return matrix

    @classmethod
    def identity(cls, n: int) -> NumericMatrix:
        """
        n x n identity matrix.

        Raises:
            ValidationError: If n < 1
        """
        n = check_positive_dimension(n, "n")
        matrix = cls(n)
        for i in range(n):
            matrix.add_row(NumericVector.unit(n, i))
        return matrix

    # --- Counters ---

    @property
    def dimension_limit(self) -> int | None:
        """Required row length (number of columns), None until fixed."""
        return self._grid.dimension_limit

    @property
    def n_rows(self) -> int:
        return self._grid.n_rows

    @property
    def n_columns(self) -> int:
        return self._grid.n_columns

    @property
    def n_elements(self) -> int:
        return self._grid.n_elements

    @property
    def shape(self) -> tuple[int, int]:
        """(n_rows, n_columns)."""
        return (self.n_rows, self.n_columns)

    def is_empty(self) -> bool:
        return self._grid.is_empty()

    def is_square(self) -> bool:
        """True iff non-empty and n_rows == dimension_limit."""
        return self._grid.is_square()

    def is_symmetric(self) -> bool:
        """True iff square and row i equals column i for all i."""
        return self._grid.is_symmetric()

    # --- Rows ---

    def can_be_added(self, row: Sequence[Any]) -> bool:
        """True if row holds only real numbers and fits the dimension limit."""
        try:
            values = check_numeric_row(row)
        except ValidationError:
            return False
        return self._grid.can_be_added(values)

    def add_row(self, row: Sequence[Any]) -> None:
        """
        Append a validated copy of row.

        Raises:
            InvalidElementError: If the row holds None or a non-real value
            IncompatibleRowSizeError: If the row length does not fit
        """
        self._grid.add_row(check_numeric_row(row))

    def get_row(self, index: int) -> NumericVector:
        return NumericVector._wrap(tuple(self._grid.get_row(index)))

    def set_row(self, index: int, row: Sequence[Any]) -> NumericVector:
        """Replace the row at index in place; return the old row."""
        old = self._grid.set_row(index, check_numeric_row(row))
        return NumericVector._wrap(tuple(old))

    def remove_row(self, index: int) -> NumericVector:
        """Remove the row at index in place and return it."""
        return NumericVector._wrap(tuple(self._grid.remove_row(index)))

    def swap_rows(self, index1: int, index2: int) -> None:
        self._grid.swap_rows(index1, index2)

    # --- Elements ---

    def get_element(self, index_row: int, index_col: int) -> Decimal:
        return self._grid.get_element(index_row, index_col)

    def set_element(self, index_row: int, index_col: int, value: Any) -> Decimal:
        """Replace one cell with a validated real number; return the old value."""
        return self._grid.set_element(
            index_row, index_col, check_real_number(value, position=index_col)
        )

    def remove_element(self, index_row: int, index_col: int) -> Decimal:
        """Always raises UnsupportedOperationError (fixed row length)."""
        return self._grid.remove_element(index_row, index_col)

    # --- Columns ---

    def get_column(self, index_col: int) -> NumericVector:
        return NumericVector._wrap(tuple(self._grid.get_column(index_col)))

    def remove_column(self, index_col: int) -> NumericVector:
        """Remove a column in place; the dimension limit shrinks by one."""
        return NumericVector._wrap(tuple(self._grid.remove_column(index_col)))

    # --- Structural operations ---

    @classmethod
    def _from_grid(cls, grid: FixedDimensionMatrix[Decimal]) -> NumericMatrix:
        matrix = cls.__new__(cls)
        matrix._grid = grid
        return matrix

    def copy(self) -> NumericMatrix:
        """Independent copy."""
        return NumericMatrix._from_grid(self._grid.copy())

    def transpose(self) -> NumericMatrix:
        return NumericMatrix._from_grid(self._grid.transpose())

    def sub_matrix(self, index_row: int, index_col: int) -> NumericMatrix:
        """Copy without row index_row and column index_col."""
        return NumericMatrix._from_grid(self._grid.sub_matrix(index_row, index_col))

    def to_numpy(self) -> NDArray[np.float64]:
        """Float64 copy, shape (n_rows, n_columns)."""
        return np.array(
            [[float(x) for x in row] for row in self._grid],
            dtype=np.float64,
        ).reshape(self.n_rows, self.n_columns)

    # --- Arithmetic ---

    def validate_operation_compatibility(self, other: NumericMatrix) -> bool:
        """True if both matrices share dimension limit and row count."""
        return (
            self.dimension_limit == other.dimension_limit
            and self.n_rows == other.n_rows
        )

    def validate_multiplication_compatibility(self, other: NumericMatrix) -> bool:
        """True if this dimension limit equals the other's row count."""
        return self.n_columns == other.n_rows

    @staticmethod
    def _operation(mat1: NumericMatrix, mat2: NumericMatrix, alpha: int) -> NumericMatrix:
        """mat1 + alpha * mat2, row by row through the vector primitive."""
        if not mat1.validate_operation_compatibility(mat2):
            raise IncompatibleMatrixDimensionError(
                f"Cannot combine a {mat1.n_rows} x {mat1.n_columns} matrix "
                f"with a {mat2.n_rows} x {mat2.n_columns} matrix.",
                expected=mat1.n_rows,
                actual=mat2.n_rows,
            )
        result = NumericMatrix(mat1.dimension_limit)
        for row1, row2 in zip(mat1._grid, mat2._grid):
            result.add_row(_combine(row1, row2, alpha))
        return result

    def add(self, other: NumericMatrix) -> NumericMatrix:
        """
        Element-wise sum.

        Raises:
            IncompatibleMatrixDimensionError: If the shapes differ
        """
        return NumericMatrix._operation(self, other, 1)

    def subtract(self, other: NumericMatrix) -> NumericMatrix:
        """
        Element-wise difference self - other.

        Raises:
            IncompatibleMatrixDimensionError: If the shapes differ
        """
        return NumericMatrix._operation(self, other, -1)

    @staticmethod
    def multiply(mat1: NumericMatrix, mat2: NumericMatrix) -> NumericMatrix:
        """
        Matrix product mat1 @ mat2.

        Each cell is the exact dot product of a row of mat1 and a column of
        mat2; nothing is rounded.

        Raises:
            IncompatibleMatrixDimensionError: If mat1's dimension limit differs
                from mat2's row count
        """
        if not mat1.validate_multiplication_compatibility(mat2):
            raise IncompatibleMatrixDimensionError(
                expected=mat1.dimension_limit, actual=mat2.n_rows
            )
        columns = [mat2._grid.get_column(j) for j in range(mat2.n_columns)]
        result = NumericMatrix(mat2.dimension_limit)
        for row in mat1._grid:
            result.add_row([_dot_exact(row, col) for col in columns])
        return result

    def is_idempotent(self) -> bool:
        """
        True iff self @ self == self.

        Raises:
            IncompatibleMatrixDimensionError: If the matrix is not square
        """
        return NumericMatrix.multiply(self, self) == self

    # --- Row-echelon reduction and determinant ---

    def order_rows(self) -> int:
        """
        Reorder rows in place by leading-zero count; return the swap count.

        See pymatrices.numeric._echelon.order_rows.
        """
        return _echelon.order_rows(self)

    def row_echelon_form(self, policy: DecimalPolicy = DEFAULT_POLICY) -> int:
        """
        Reduce this matrix to row-echelon form in place; return the swap count.

        See pymatrices.numeric._echelon.row_echelon_form.
        """
        return _echelon.row_echelon_form(self, policy)

    def _determinant_exact(self, policy: DecimalPolicy = DEFAULT_POLICY) -> Decimal:
        if not self.is_square():
            raise NonSquareMatrixError(self.n_rows, self.dimension_limit)

        work = self.copy()
        swaps = work.row_echelon_form(policy)

        sign = decimal_ops.ONE if swaps % 2 == 0 else decimal_ops.negate(decimal_ops.ONE)
        diagonal = (work.get_element(i, i) for i in range(work.n_rows))
        determinant = decimal_ops.exact_product(diagonal, start=sign)
        return decimal_ops.ZERO if decimal_ops.is_zero(determinant) else determinant

    def determinant(self, policy: DecimalPolicy = DEFAULT_POLICY) -> float:
        """
        Determinant via row-echelon reduction of a private copy.

        det = (-1)^swaps * product of the reduced diagonal. A singular matrix
        reduces to a zero on the diagonal and yields 0.0.

        Args:
            policy: Division scale/rounding and zero-snap threshold

        Returns:
            The determinant as a float

        Raises:
            NonSquareMatrixError: If the matrix is not square
        """
        return decimal_ops.to_float(self._determinant_exact(policy), "determinant")

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[NumericVector]:
        return (NumericVector._wrap(tuple(row)) for row in self._grid)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return self.get_element(*key)
        return self.get_row(key)

    def __add__(self, other: Any) -> NumericMatrix:
        if not isinstance(other, NumericMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> NumericMatrix:
        if not isinstance(other, NumericMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Any) -> NumericMatrix:
        if not isinstance(other, NumericMatrix):
            return NotImplemented
        return NumericMatrix.multiply(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self.n_rows == other.n_rows and all(
            len(a) == len(b) and list(a) == list(b) for a, b in zip(self, other)
        )

    __hash__ = None

    def __str__(self) -> str:
        if self.is_empty():
            return "[]"
        return "\n".join(str(row) for row in self)

    def __repr__(self) -> str:
        return (
            f"NumericMatrix(n_rows={self.n_rows}, "
            f"dimension_limit={self.dimension_limit})"
        )
