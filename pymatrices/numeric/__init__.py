"""
Numeric vectors and matrices with exact decimal arithmetic.

Public API:
    NumericVector       - immutable vector of Decimals
    NumericMatrix       - fixed-dimension matrix of Decimals
    determinant(m)      - Determinant via row-echelon reduction
    row_echelon(m)      - Reduced copy, swap count, pivots (EchelonSolution)
    add(a, b)           - Element-wise sum
    subtract(a, b)      - Element-wise difference
    multiply(a, b)      - Exact matrix product
    identity(n)         - n x n identity matrix
"""

from pymatrices.numeric.vector import (
    NumericVector,
    cross_product,
    dot_product,
    index_first_nonzero,
    is_perpendicular,
    scalar_multiplication,
)
from pymatrices.numeric.matrix import NumericMatrix
from pymatrices.numeric.solution import EchelonParams, EchelonSolution
from pymatrices.numeric.solvers import (
    determinant,
    row_echelon,
    add,
    subtract,
    multiply,
    identity,
)

__all__ = [
    "NumericVector",
    "NumericMatrix",
    "EchelonParams",
    "EchelonSolution",
    "determinant",
    "row_echelon",
    "add",
    "subtract",
    "multiply",
    "identity",
    "cross_product",
    "dot_product",
    "index_first_nonzero",
    "is_perpendicular",
    "scalar_multiplication",
]
