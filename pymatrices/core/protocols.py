"""
Core protocols for pymatrices.

The matrix layers (irregular container, fixed-dimension wrapper, numeric
matrix) are separate types composed around each other rather than a class
hierarchy. They share the small structural interface below, so code that
only appends, reads and replaces rows can accept any of them.

Design Principles:
    - Minimal contracts: prescribe only what every layer supports
    - Structural typing (Protocol), not nominal inheritance
    - Behavior differences are explicit checks inside each layer
"""

from typing import Iterator, Protocol, Sequence, TypeVar, runtime_checkable

E = TypeVar('E')  # Element type


@runtime_checkable
class MatrixLike(Protocol[E]):
    """
    Row-oriented matrix capability.

    Implemented by Matrix, FixedDimensionMatrix and NumericMatrix.
    """

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def dimension_limit(self) -> int | None:
        """
        Required row length, or None when rows may have any length.

        The irregular Matrix always returns None.
        """
        ...

    def add_row(self, row: Sequence[E]) -> None:
        """Append a defensive copy of row."""
        ...

    def get_row(self, index: int) -> list[E]:
        """Return the row at index."""
        ...

    def set_row(self, index: int, row: Sequence[E]) -> list[E]:
        """Replace the row at index, returning the previous row."""
        ...

    def remove_row(self, index: int) -> list[E]:
        """Remove and return the row at index."""
        ...

    def __iter__(self) -> Iterator[list[E]]:
        ...

    def __len__(self) -> int:
        ...
