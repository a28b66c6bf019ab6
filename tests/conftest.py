"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices.numeric.matrix import NumericMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_3x3():
    """Non-singular 3x3 matrix with determinant -3."""
    return NumericMatrix.from_rows([
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 10],
    ])


@pytest.fixture
def singular_3x3():
    """Rank-2 matrix (row 3 = row 1 + row 2)."""
    return NumericMatrix.from_rows([
        [1, 2, 3],
        [4, 5, 6],
        [5, 7, 9],
    ])


@pytest.fixture
def well_conditioned(rng):
    """Factory for diagonally dominant random n x n arrays."""
    def make(n):
        A = rng.standard_normal((n, n))
        return A + n * np.eye(n)
    return make
