"""
Matrix: a general two-dimensional container with no numeric semantics.

Rows may have different lengths. The container tracks three counters:

    n_rows      number of rows
    n_columns   the longest row ever observed; only meaningful when the rows
                are regular. Removing a column decrements it, removing rows
                does not.
    n_elements  sum of all row lengths, None placeholders included

Every row is copied on the way in, so callers never share list objects with
the container. Column-wise operations raise IrregularMatrixRowsError when a
row is too short; the *_padded / *_or_none variants fill the gaps with None
instead.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar

from pymatrices.core.exceptions import IrregularMatrixRowsError
from pymatrices.core.protocols import MatrixLike
from pymatrices.core.validation import check_index, check_row

E = TypeVar('E')


class Matrix(Generic[E]):
    """
    Variable-row-length matrix stored as a list of rows.

    Construction:
        Matrix()                      # empty
        Matrix([[1, 2], [3]])         # rows copied in order

    Mutating methods (add_row, set_row, remove_row, remove_column,
    set_element, remove_element, swap_rows) act in place. Everything else
    returns new objects.
    """

    def __init__(self, rows: Iterable[Sequence[E]] | None = None):
        self._rows: list[list[E]] = []
        self._n_columns = 0
        self._n_elements = 0
        if rows is not None:
            for row in rows:
                self.add_row(row)

    # --- Counters ---

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def n_columns(self) -> int:
        """Longest row length observed (see module docstring)."""
        return self._n_columns

    @property
    def n_elements(self) -> int:
        """Total number of cells, None placeholders included."""
        return self._n_elements

    @property
    def dimension_limit(self) -> int | None:
        """Irregular matrices have no required row length."""
        return None

    def is_empty(self) -> bool:
        """True when the matrix holds no elements."""
        return self._n_elements == 0

    def is_regular(self) -> bool:
        """True when every row has n_columns elements."""
        return all(len(row) == self._n_columns for row in self._rows)

    # --- Rows ---

    def add_row(self, row: Sequence[E]) -> None:
        """Append a copy of row."""
        new_row = check_row(row)
        self._rows.append(new_row)
        self._n_columns = max(self._n_columns, len(new_row))
        self._n_elements += len(new_row)

    def get_row(self, index: int) -> list[E]:
        """Return a copy of the row at index."""
        index = check_index(index, self.n_rows, 'row')
        return list(self._rows[index])

    def set_row(self, index: int, row: Sequence[E]) -> list[E]:
        """Replace the row at index with a copy of row; return the old row."""
        index = check_index(index, self.n_rows, 'row')
        new_row = check_row(row)
        old_row = self._rows[index]
        self._rows[index] = new_row
        self._n_columns = max(self._n_columns, len(new_row))
        self._n_elements += len(new_row) - len(old_row)
        return old_row

    def remove_row(self, index: int) -> list[E]:
        """Remove and return the row at index."""
        index = check_index(index, self.n_rows, 'row')
        row = self._rows.pop(index)
        self._n_elements -= len(row)
        return row

    def swap_rows(self, index1: int, index2: int) -> None:
        """Exchange two rows in place."""
        index1 = check_index(index1, self.n_rows, 'row')
        index2 = check_index(index2, self.n_rows, 'row')
        self._rows[index1], self._rows[index2] = self._rows[index2], self._rows[index1]

    # --- Elements ---

    def get_element(self, index_row: int, index_col: int) -> E:
        """Return the element at (index_row, index_col)."""
        row = self._rows[check_index(index_row, self.n_rows, 'row')]
        return row[check_index(index_col, len(row), 'column')]

    def set_element(self, index_row: int, index_col: int, value: E) -> E:
        """Replace the element at (index_row, index_col); return the old one."""
        row = self._rows[check_index(index_row, self.n_rows, 'row')]
        index_col = check_index(index_col, len(row), 'column')
        old_value = row[index_col]
        row[index_col] = value
        return old_value

    def remove_element(self, index_row: int, index_col: int) -> E:
        """Remove the element at (index_row, index_col), shortening its row."""
        row = self._rows[check_index(index_row, self.n_rows, 'row')]
        value = row.pop(check_index(index_col, len(row), 'column'))
        self._n_elements -= 1
        return value

    # --- Columns ---

    def _first_short_row(self, index_col: int) -> int:
        """Index of the first row without column index_col, or -1."""
        for i, row in enumerate(self._rows):
            if len(row) <= index_col:
                return i
        return -1

    def get_column_or_none(self, index_col: int) -> list[E | None]:
        """
        Return column index_col, padding short rows with None.

        Raises:
            MatrixIndexError: If index_col >= n_columns
        """
        index_col = check_index(index_col, self._n_columns, 'column')
        return [row[index_col] if index_col < len(row) else None
                for row in self._rows]

    def get_column(self, index_col: int) -> list[E]:
        """
        Return column index_col.

        Raises:
            MatrixIndexError: If index_col >= n_columns
            IrregularMatrixRowsError: If some row is too short
        """
        index_col = check_index(index_col, self._n_columns, 'column')
        short = self._first_short_row(index_col)
        if short != -1:
            raise IrregularMatrixRowsError(
                f"The matrix has an uncompleted column {index_col} "
                f"(row index {short}) due to inconsistent row sizes",
                index=short, column=index_col,
            )
        return [row[index_col] for row in self._rows]

    def remove_column(self, index_col: int) -> list[E]:
        """
        Remove column index_col from every row and return it.

        The matrix is left untouched when the column is incomplete.

        Raises:
            MatrixIndexError: If index_col >= n_columns
            IrregularMatrixRowsError: If some row is too short
        """
        column = self.get_column(index_col)
        for row in self._rows:
            del row[index_col]
        self._n_elements -= len(column)
        self._n_columns -= 1
        return column

    # --- Structural operations ---

    def copy(self) -> Matrix[E]:
        """Structurally independent copy (rows are copied, elements shared)."""
        clone: Matrix[E] = Matrix(self._rows)
        clone._n_columns = self._n_columns
        return clone

    def transpose(self) -> Matrix[E]:
        """
        New matrix whose rows are this matrix's columns.

        Raises:
            IrregularMatrixRowsError: If the rows are irregular
        """
        if not self._rows:
            return Matrix()
        return Matrix(self.get_column(j) for j in range(self._n_columns))

    def transpose_padded(self) -> Matrix[E | None]:
        """Transpose, padding the gaps of short rows with None."""
        if not self._rows:
            return Matrix()
        return Matrix(self.get_column_or_none(j) for j in range(self._n_columns))

    def is_symmetric(self) -> bool:
        """True iff the matrix is square and row i equals column i for all i."""
        if self.is_empty() or self.n_rows != self._n_columns or not self.is_regular():
            return False
        return all(self._rows[i] == self.get_column(i) for i in range(self.n_rows))

    def sub_matrix(self, index_row: int, index_col: int) -> Matrix[E]:
        """Copy of this matrix without row index_row and column index_col."""
        sub = self.copy()
        sub.remove_row(index_row)
        sub.remove_column(index_col)
        return sub

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[list[E]]:
        return (list(row) for row in self._rows)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return self.get_element(*key)
        return self.get_row(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self.n_rows == other.n_rows and all(
            list(a) == list(b) for a, b in zip(self, other)
        )

    def __str__(self) -> str:
        if self.is_empty():
            return "[]"
        return "\n".join(str(row) for row in self._rows)

    def __repr__(self) -> str:
        return (
            f"Matrix(n_rows={self.n_rows}, n_columns={self._n_columns}, "
            f"n_elements={self._n_elements})"
        )
