"""
General-purpose matrix containers.

Public API:
    Matrix               - rows of any length, no numeric semantics
    FixedDimensionMatrix - every row shares one length (the dimension limit)
"""

from pymatrices.matrix.container import Matrix
from pymatrices.matrix.fixed import FixedDimensionMatrix

__all__ = [
    "Matrix",
    "FixedDimensionMatrix",
]
