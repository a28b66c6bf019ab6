"""
Core infrastructure for pymatrices.

Shared abstractions used by the matrix containers and the numeric layer.

Key components:
    protocols: MatrixLike protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Decimal substrate, numeric policy, timing
"""

from pymatrices.core.protocols import MatrixLike
from pymatrices.core.result import Result
from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    InvalidElementError,
    MatrixIndexError,
    IrregularMatrixRowsError,
    IncompatibleVectorSizeError,
    IncompatibleRowSizeError,
    IncompatibleMatrixDimensionError,
    NonSquareMatrixError,
    UnsupportedOperationError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    # Result
    "Result",
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "InvalidElementError",
    "MatrixIndexError",
    "IrregularMatrixRowsError",
    "IncompatibleVectorSizeError",
    "IncompatibleRowSizeError",
    "IncompatibleMatrixDimensionError",
    "NonSquareMatrixError",
    "UnsupportedOperationError",
]
