"""
Algebraic properties of vector and matrix operations.

Validates, on seeded random inputs:
    - Vector addition commutes; subtraction anti-commutes
    - det(identity) = 1; a row swap negates the determinant; scaling a row
      by k scales the determinant by k
    - Multiplication is associative and has a right identity
    - transpose(transpose(M)) == M
    - A wrong-length row never mutates a fixed-dimension matrix
"""

import numpy as np
import pytest

from pymatrices.core.compute.tolerances import CHAINED
from pymatrices.core.exceptions import IncompatibleRowSizeError
from pymatrices.numeric.matrix import NumericMatrix
from pymatrices.numeric.vector import add, subtract


def _random_int_matrix(rng, n_rows, n_columns):
    return NumericMatrix.from_array(rng.integers(-9, 10, size=(n_rows, n_columns)))


# ═══════════════════════════════════════════════════════════════════════
# Vectors
# ═══════════════════════════════════════════════════════════════════════


class TestVectorProperties:

    @pytest.mark.parametrize("size", [1, 3, 7])
    def test_add_commutes(self, rng, size):
        v1 = rng.standard_normal(size)
        v2 = rng.standard_normal(size)
        assert add(v1, v2) == add(v2, v1)

    @pytest.mark.parametrize("size", [1, 3, 7])
    def test_subtract_anti_commutes(self, rng, size):
        v1 = rng.standard_normal(size)
        v2 = rng.standard_normal(size)
        assert subtract(v1, v2) == -subtract(v2, v1)


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminantProperties:

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_row_swap_negates(self, well_conditioned, n):
        A = well_conditioned(n)
        swapped = A.copy()
        swapped[[0, n - 1]] = swapped[[n - 1, 0]]

        det = NumericMatrix.from_array(A).determinant()
        det_swapped = NumericMatrix.from_array(swapped).determinant()
        np.testing.assert_allclose(det_swapped, -det, rtol=CHAINED.rtol, atol=CHAINED.atol)

    @pytest.mark.parametrize("k", [2, -3, 0.5])
    def test_row_scaling(self, well_conditioned, k):
        A = well_conditioned(4)
        scaled = A.copy()
        scaled[1] *= k

        det = NumericMatrix.from_array(A).determinant()
        det_scaled = NumericMatrix.from_array(scaled).determinant()
        np.testing.assert_allclose(det_scaled, k * det, rtol=CHAINED.rtol, atol=CHAINED.atol)

    def test_integer_row_swap_is_exact(self, square_3x3):
        swapped = square_3x3.copy()
        swapped.swap_rows(0, 2)
        assert swapped.determinant() == -square_3x3.determinant()


# ═══════════════════════════════════════════════════════════════════════
# Multiplication
# ═══════════════════════════════════════════════════════════════════════


class TestMultiplicationProperties:

    def test_associative_integers(self, rng):
        A = _random_int_matrix(rng, 3, 4)
        B = _random_int_matrix(rng, 4, 2)
        C = _random_int_matrix(rng, 2, 5)
        left = NumericMatrix.multiply(NumericMatrix.multiply(A, B), C)
        right = NumericMatrix.multiply(A, NumericMatrix.multiply(B, C))
        assert left == right

    def test_associative_floats(self, rng):
        A = NumericMatrix.from_array(rng.standard_normal((3, 3)))
        B = NumericMatrix.from_array(rng.standard_normal((3, 3)))
        C = NumericMatrix.from_array(rng.standard_normal((3, 3)))
        left = ((A @ B) @ C).to_numpy()
        right = (A @ (B @ C)).to_numpy()
        np.testing.assert_allclose(left, right, rtol=CHAINED.rtol, atol=CHAINED.atol)

    @pytest.mark.parametrize("shape", [(1, 1), (2, 3), (4, 2)])
    def test_right_identity(self, rng, shape):
        A = NumericMatrix.from_array(rng.standard_normal(shape))
        assert NumericMatrix.multiply(A, NumericMatrix.identity(shape[1])) == A

    def test_matches_numpy(self, rng):
        a = rng.integers(-5, 6, size=(3, 4))
        b = rng.integers(-5, 6, size=(4, 2))
        product = NumericMatrix.from_array(a) @ NumericMatrix.from_array(b)
        np.testing.assert_array_equal(product.to_numpy(), a @ b)


# ═══════════════════════════════════════════════════════════════════════
# Structure
# ═══════════════════════════════════════════════════════════════════════


class TestStructuralProperties:

    @pytest.mark.parametrize("shape", [(1, 4), (3, 3), (5, 2)])
    def test_transpose_round_trip(self, rng, shape):
        M = NumericMatrix.from_array(rng.standard_normal(shape))
        assert M.transpose().transpose() == M

    @pytest.mark.parametrize("bad_length", [1, 2, 4, 6])
    def test_wrong_length_row_never_mutates(self, rng, bad_length):
        M = _random_int_matrix(rng, 3, 3)
        before = M.copy()
        with pytest.raises(IncompatibleRowSizeError) as exc_info:
            M.add_row(list(range(bad_length)))
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == bad_length
        assert M == before
        assert M.n_elements == 9
