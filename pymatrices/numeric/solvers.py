"""
Functional API for numeric matrices.

Every function accepts a NumericMatrix, a 2D numpy array or nested
sequences of real numbers, and never modifies its arguments.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np

from pymatrices.core.compute.timing import timed
from pymatrices.core.compute.tolerances import DEFAULT_POLICY, DecimalPolicy
from pymatrices.core.result import Result
from pymatrices.numeric import _echelon
from pymatrices.numeric.matrix import NumericMatrix
from pymatrices.numeric.solution import EchelonParams, EchelonSolution
from pymatrices.numeric.vector import index_first_nonzero

MatrixInput = Union[NumericMatrix, np.ndarray, Sequence[Sequence[Any]]]


def _ensure_matrix(data: MatrixInput) -> NumericMatrix:
    """Convert raw input to NumericMatrix if needed."""
    if isinstance(data, NumericMatrix):
        return data
    if isinstance(data, np.ndarray):
        return NumericMatrix.from_array(data)
    return NumericMatrix.from_rows(data)


def determinant(
    data: MatrixInput,
    *,
    policy: DecimalPolicy = DEFAULT_POLICY,
) -> float:
    """
    Determinant of a square matrix.

    Args:
        data: Square matrix
        policy: Division scale/rounding and zero-snap threshold

    Returns:
        The determinant as a float

    Raises:
        NonSquareMatrixError: If the matrix is not square
    """
    return _ensure_matrix(data).determinant(policy)


def row_echelon(
    data: MatrixInput,
    *,
    policy: DecimalPolicy = DEFAULT_POLICY,
) -> EchelonSolution:
    """
    Reduce a copy of the matrix to row-echelon form.

    Works on any non-empty rectangular matrix. For square input the solution
    also reports the determinant.

    Args:
        data: Matrix to reduce
        policy: Division scale/rounding and zero-snap threshold

    Returns:
        EchelonSolution with the reduced matrix, swap count and pivots
    """
    source = _ensure_matrix(data)

    warnings_list: list[str] = []

    with timed() as timer:
        with timer.section('copy'):
            reduced = source.copy()

        with timer.section('elimination'):
            swaps = _echelon.row_echelon_form(reduced, policy)

        pivots = tuple(index_first_nonzero(row) for row in reduced)

    rank = sum(1 for p in pivots if p != -1)
    if source.is_square() and rank < source.n_rows:
        warnings_list.append(
            f"Matrix is singular: rank {rank} < {source.n_rows}"
        )

    result = Result(
        params=EchelonParams(
            matrix=reduced,
            swaps=swaps,
            pivot_columns=pivots,
            sign=1 if swaps % 2 == 0 else -1,
        ),
        info={
            'method': 'gaussian_elimination',
            'policy': policy.name,
            'division_places': policy.division_places,
            'rounding': policy.rounding,
            'zero_snap': str(policy.zero_snap),
        },
        timing=timer.result(),
        backend_name='decimal_echelon',
        warnings=tuple(warnings_list),
    )
    return EchelonSolution(_result=result)


def add(a: MatrixInput, b: MatrixInput) -> NumericMatrix:
    """
    Element-wise a + b.

    Raises:
        IncompatibleMatrixDimensionError: If the shapes differ
    """
    return _ensure_matrix(a).add(_ensure_matrix(b))


def subtract(a: MatrixInput, b: MatrixInput) -> NumericMatrix:
    """
    Element-wise a - b.

    Raises:
        IncompatibleMatrixDimensionError: If the shapes differ
    """
    return _ensure_matrix(a).subtract(_ensure_matrix(b))


def multiply(a: MatrixInput, b: MatrixInput) -> NumericMatrix:
    """
    Matrix product a @ b, computed exactly.

    Raises:
        IncompatibleMatrixDimensionError: If a's column count differs from
            b's row count
    """
    return NumericMatrix.multiply(_ensure_matrix(a), _ensure_matrix(b))


def identity(n: int) -> NumericMatrix:
    """n x n identity matrix."""
    return NumericMatrix.identity(n)
