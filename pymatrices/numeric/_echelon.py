"""
Row ordering and row-echelon elimination kernels.

Both kernels mutate the matrix they are given (through get_row/set_row only)
and return the number of row swaps performed, which fixes the sign of the
determinant. Callers that must not mutate their input pass a copy.

Row ordering key: index of the first non-zero element, +inf for a zero row.
"""

from __future__ import annotations

import math
from decimal import Decimal

from pymatrices.core.compute import decimal_ops
from pymatrices.core.compute.tolerances import DEFAULT_POLICY, DecimalPolicy
from pymatrices.core.protocols import MatrixLike
from pymatrices.numeric.vector import (
    _combine,
    index_first_nonzero,
    scalar_multiplication,
)


def _pivot_key(row) -> float:
    index = index_first_nonzero(row)
    return math.inf if index == -1 else index


def _swap(matrix: MatrixLike[Decimal], index1: int, index2: int) -> None:
    row1 = matrix.get_row(index1)
    matrix.set_row(index1, matrix.get_row(index2))
    matrix.set_row(index2, row1)


def order_rows(matrix: MatrixLike[Decimal]) -> int:
    """
    Move rows with more leading zeros below rows with fewer.

    Every pair (row1, row2) with row1 < row2 is compared once; the pair is
    swapped when row1's key is greater than row2's, or when row1 is a zero
    row (even if row2 is one too). Each swap is counted.

    Example:
        (0, 0, 4) above (2, 3, 1) -> swapped, returns 1
        (3, 4, 5) above (0, 2, 3) -> unchanged, returns 0

    Returns:
        Number of swaps performed
    """
    swaps = 0
    n = matrix.n_rows
    for row1 in range(n - 1):
        for row2 in range(row1 + 1, n):
            key1 = _pivot_key(matrix.get_row(row1))
            key2 = _pivot_key(matrix.get_row(row2))
            if key1 > key2 or key1 == math.inf:
                _swap(matrix, row1, row2)
                swaps += 1
    return swaps


def row_echelon_form(
    matrix: MatrixLike[Decimal],
    policy: DecimalPolicy = DEFAULT_POLICY,
) -> int:
    """
    Reduce matrix to row-echelon form in place.

    One ordering pass runs before elimination. Then, for each pivot row in
    turn, every lower row whose first non-zero column matches the pivot
    row's is replaced by row2 - alpha * row1 with
    alpha = row2[p] / row1[p] (policy.division_places digits, policy
    rounding), and the subtraction snaps |x| <= policy.zero_snap to zero.
    One ordering pass runs after each pivot row.

    Returns:
        Total number of row swaps
    """
    swaps = order_rows(matrix)
    n = matrix.n_rows

    for row1 in range(n - 1):
        pivot_row = matrix.get_row(row1)
        pivot = index_first_nonzero(pivot_row)

        for row2 in range(row1 + 1, n):
            row = matrix.get_row(row2)
            if pivot == -1 or index_first_nonzero(row) != pivot:
                continue

            alpha = decimal_ops.divide(
                row[pivot], pivot_row[pivot],
                places=policy.division_places,
                rounding=policy.rounding,
            )
            scaled = scalar_multiplication(pivot_row, alpha)
            matrix.set_row(row2, _combine(row, scaled, -1, policy.zero_snap))

        swaps += order_rows(matrix)

    return swaps
