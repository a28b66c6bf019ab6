"""
Row-echelon solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TYPE_CHECKING

from pymatrices.core.compute import decimal_ops
from pymatrices.core.result import Result

if TYPE_CHECKING:
    from pymatrices.numeric.matrix import NumericMatrix


@dataclass(frozen=True)
class EchelonParams:
    """
    Parameter payload for a row-echelon reduction.

    pivot_columns holds, per row of the reduced matrix, the index of its
    first non-zero element (-1 for a zero row).
    """
    matrix: 'NumericMatrix'
    swaps: int
    pivot_columns: tuple[int, ...]
    sign: int


@dataclass
class EchelonSolution:
    """
    User-facing row-echelon results.

    Wraps Result[EchelonParams] and provides convenient accessors.
    """
    _result: Result[EchelonParams]

    @property
    def matrix(self) -> 'NumericMatrix':
        """Reduced matrix (a copy; the input is never modified)."""
        return self._result.params.matrix.copy()

    @property
    def swaps(self) -> int:
        """Row swaps performed during ordering passes."""
        return self._result.params.swaps

    @property
    def sign(self) -> int:
        """(-1) ** swaps."""
        return self._result.params.sign

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def rank(self) -> int:
        """Number of non-zero rows in the reduced matrix."""
        return sum(1 for p in self.pivot_columns if p != -1)

    @property
    def determinant_exact(self) -> Decimal | None:
        """sign * product of the reduced diagonal, None if not square."""
        reduced = self._result.params.matrix
        if not reduced.is_square():
            return None
        diagonal = (reduced.get_element(i, i) for i in range(reduced.n_rows))
        value = decimal_ops.exact_product(diagonal, start=Decimal(self.sign))
        return decimal_ops.ZERO if decimal_ops.is_zero(value) else value

    @property
    def determinant(self) -> float | None:
        """Determinant as a float, None if the matrix is not square."""
        value = self.determinant_exact
        if value is None:
            return None
        return decimal_ops.to_float(value, "determinant")

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Reduced matrix followed by swap, rank and determinant lines."""
        lines = ["Row-echelon form:", str(self._result.params.matrix), ""]
        lines.append(f"Row swaps:     {self.swaps}")
        lines.append(f"Rank:          {self.rank}")
        det = self.determinant
        if det is not None:
            lines.append(f"Determinant:   {det}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EchelonSolution(shape={self._result.params.matrix.shape}, "
            f"swaps={self.swaps}, rank={self.rank})"
        )
