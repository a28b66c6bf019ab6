"""
pymatrices: matrix and vector arithmetic on exact decimals.

Every element-wise step runs on decimal.Decimal values, so sums and products
are exact and divisions round once to a fixed number of digits.

Submodules:
    matrix: General containers (irregular Matrix, FixedDimensionMatrix)
    numeric: NumericVector, NumericMatrix and the functional API
    core: Exceptions, validation, decimal substrate, Result
"""

__version__ = "0.1.0"

from pymatrices import core
from pymatrices import matrix
from pymatrices import numeric
from pymatrices.matrix import Matrix, FixedDimensionMatrix
from pymatrices.numeric import NumericVector, NumericMatrix

__all__ = [
    "__version__",
    "core",
    "matrix",
    "numeric",
    "Matrix",
    "FixedDimensionMatrix",
    "NumericVector",
    "NumericMatrix",
]
