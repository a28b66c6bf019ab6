"""
FixedDimensionMatrix: a Matrix whose rows all share one length.

The required length (the dimension limit) is fixed either by the constructor
or by the first row added. Every later add_row/set_row is checked against it
before anything is mutated.

This is a wrapper around Matrix rather than a subclass: each check is an
explicit step in the method that needs it.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar

from pymatrices.core.exceptions import (
    IncompatibleRowSizeError,
    UnsupportedOperationError,
)
from pymatrices.core.protocols import MatrixLike
from pymatrices.core.validation import check_positive_dimension, check_row
from pymatrices.matrix.container import Matrix

E = TypeVar('E')


class FixedDimensionMatrix(Generic[E]):
    """
    Matrix with a fixed row length.

    Construction:
        FixedDimensionMatrix()                    # dimension set by first row
        FixedDimensionMatrix(dimension=3)         # dimension fixed up front
        FixedDimensionMatrix.from_rows(rows)      # rows must agree in length
    """

    def __init__(self, dimension: int | None = None):
        self._matrix: Matrix[E] = Matrix()
        self._dimension_limit: int | None = None
        if dimension is not None:
            self._dimension_limit = check_positive_dimension(dimension, "dimension")

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[E]],
        dimension: int | None = None,
    ) -> FixedDimensionMatrix[E]:
        """
        Build from an iterable of rows (a Matrix, nested lists, ...).

        Raises:
            IncompatibleRowSizeError: If the rows do not share one length
        """
        matrix = cls(dimension)
        for row in rows:
            matrix.add_row(row)
        return matrix

    # --- Counters ---

    @property
    def dimension_limit(self) -> int | None:
        """Required row length, or None until the first row is added."""
        return self._dimension_limit

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return self._matrix.n_rows

    @property
    def n_columns(self) -> int:
        """Number of columns (the dimension limit, 0 if unset)."""
        return self._dimension_limit or 0

    @property
    def n_elements(self) -> int:
        """Total number of cells."""
        return self._matrix.n_elements

    def is_empty(self) -> bool:
        """True when the matrix holds no elements."""
        return self._matrix.is_empty()

    def is_square(self) -> bool:
        """True iff non-empty and the dimension limit equals the row count."""
        return not self.is_empty() and self._dimension_limit == self.n_rows

    # --- Rows ---

    def can_be_added(self, row: Sequence[E]) -> bool:
        """
        Check whether row fits this matrix.

        A row fits when it is non-empty and either no dimension has been
        fixed yet or its length equals the dimension limit.
        """
        size = len(row)
        if size == 0:
            return False
        return self._dimension_limit is None or size == self._dimension_limit

    def _check_fits(self, row: Any) -> list[E]:
        new_row = check_row(row)
        if not self.can_be_added(new_row):
            raise IncompatibleRowSizeError(
                expected=self._dimension_limit, actual=len(new_row)
            )
        return new_row

    def add_row(self, row: Sequence[E]) -> None:
        """
        Append a copy of row.

        Raises:
            IncompatibleRowSizeError: If the row does not fit (see can_be_added)
        """
        new_row = self._check_fits(row)
        if self._dimension_limit is None:
            self._dimension_limit = len(new_row)
        self._matrix.add_row(new_row)

    def set_row(self, index: int, row: Sequence[E]) -> list[E]:
        """
        Replace the row at index; return the old row.

        Raises:
            IncompatibleRowSizeError: If the row does not fit
        """
        return self._matrix.set_row(index, self._check_fits(row))

    def get_row(self, index: int) -> list[E]:
        return self._matrix.get_row(index)

    def remove_row(self, index: int) -> list[E]:
        return self._matrix.remove_row(index)

    def swap_rows(self, index1: int, index2: int) -> None:
        self._matrix.swap_rows(index1, index2)

    # --- Elements ---

    def get_element(self, index_row: int, index_col: int) -> E:
        return self._matrix.get_element(index_row, index_col)

    def set_element(self, index_row: int, index_col: int, value: E) -> E:
        return self._matrix.set_element(index_row, index_col, value)

    def remove_element(self, index_row: int, index_col: int) -> E:
        """
        Not supported: removing one cell would break the fixed row length.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(
            "not possible operation on fixed dimension matrices",
            operation="remove_element",
        )

    # --- Columns ---

    def get_column(self, index_col: int) -> list[E]:
        return self._matrix.get_column(index_col)

    def get_column_or_none(self, index_col: int) -> list[E | None]:
        return self._matrix.get_column_or_none(index_col)

    def remove_column(self, index_col: int) -> list[E]:
        """Remove column index_col from every row; the dimension limit shrinks by one."""
        column = self._matrix.remove_column(index_col)
        self._dimension_limit -= 1
        return column

    # --- Structural operations ---

    def copy(self) -> FixedDimensionMatrix[E]:
        """Independent copy keeping the dimension limit."""
        clone: FixedDimensionMatrix[E] = FixedDimensionMatrix()
        clone._dimension_limit = self._dimension_limit
        clone._matrix = self._matrix.copy()
        return clone

    def transpose(self) -> FixedDimensionMatrix[E]:
        """New matrix whose rows are this matrix's columns."""
        return FixedDimensionMatrix.from_rows(self._matrix.transpose())

    def is_symmetric(self) -> bool:
        """True iff square and row i equals column i for all i."""
        return self.is_square() and self._matrix.is_symmetric()

    def sub_matrix(self, index_row: int, index_col: int) -> FixedDimensionMatrix[E]:
        """Copy without row index_row and column index_col."""
        sub = self.copy()
        sub.remove_row(index_row)
        sub.remove_column(index_col)
        return sub

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[list[E]]:
        return iter(self._matrix)

    def __getitem__(self, key: Any) -> Any:
        return self._matrix[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self._matrix == other

    def __str__(self) -> str:
        return str(self._matrix)

    def __repr__(self) -> str:
        return (
            f"FixedDimensionMatrix(n_rows={self.n_rows}, "
            f"dimension_limit={self._dimension_limit})"
        )
