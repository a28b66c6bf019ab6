"""
Tests for row ordering, row-echelon reduction and the determinant.

Validates:
    - order_rows: pairwise pass keyed on the first non-zero index, zero rows
      sink, every swap counted
    - row_echelon_form: in-place reduction, returned swap count
    - determinant: identity, hand-computed cases, sign from swaps,
      singular matrices, 1x1, non-square rejection, input never mutated
    - DecimalPolicy controls division scale
"""

import math
from decimal import Decimal, ROUND_HALF_UP

import pytest

from pymatrices.core.compute.tolerances import DecimalPolicy
from pymatrices.core.exceptions import NonSquareMatrixError
from pymatrices.matrix.container import Matrix
from pymatrices.numeric.matrix import NumericMatrix


# ═══════════════════════════════════════════════════════════════════════
# order_rows
# ═══════════════════════════════════════════════════════════════════════


class TestOrderRows:

    def test_leading_zeros_move_down(self):
        m = NumericMatrix.from_rows([[0, 0, 4], [2, 3, 1]])
        assert m.order_rows() == 1
        assert m == Matrix([[2, 3, 1], [0, 0, 4]])

    def test_already_ordered(self):
        m = NumericMatrix.from_rows([[3, 4, 5], [0, 2, 3]])
        assert m.order_rows() == 0
        assert m == Matrix([[3, 4, 5], [0, 2, 3]])

    def test_equal_keys_not_swapped(self):
        m = NumericMatrix.from_rows([[1, 2], [3, 4]])
        assert m.order_rows() == 0

    def test_zero_row_sinks(self):
        m = NumericMatrix.from_rows([[0, 0], [1, 2]])
        assert m.order_rows() == 1
        assert m == Matrix([[1, 2], [0, 0]])

    def test_zero_rows_swap_with_each_other(self):
        """A row without pivot is swapped even when the other row has none."""
        m = NumericMatrix.from_rows([[0, 0, 0], [0, 0, 0], [1, 1, 1]])
        assert m.order_rows() == 3
        assert m.get_row(0) == [1, 1, 1]

    def test_three_row_sort(self):
        m = NumericMatrix.from_rows([[0, 0, 1], [0, 1, 0], [1, 0, 0]])
        swaps = m.order_rows()
        assert m == Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert swaps == 3


# ═══════════════════════════════════════════════════════════════════════
# row_echelon_form
# ═══════════════════════════════════════════════════════════════════════


class TestRowEchelonForm:

    def test_reduces_in_place(self):
        m = NumericMatrix.from_rows([[2, 1], [1, 1]])
        assert m.row_echelon_form() == 0
        assert m == Matrix([[2, 1], [0, Decimal('0.5')]])

    def test_swap_count(self):
        m = NumericMatrix.from_rows([[0, 1], [1, 0]])
        assert m.row_echelon_form() == 1
        assert m == Matrix([[1, 0], [0, 1]])

    def test_upper_triangular_result(self, square_3x3):
        square_3x3.row_echelon_form()
        for i in range(3):
            for j in range(i):
                assert square_3x3.get_element(i, j) == 0

    def test_rectangular(self):
        m = NumericMatrix.from_rows([[1, 2, 3], [2, 4, 7]])
        m.row_echelon_form()
        assert m == Matrix([[1, 2, 3], [0, 0, 1]])


# ═══════════════════════════════════════════════════════════════════════
# determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    @pytest.mark.parametrize("n", [1, 2, 3, 6])
    def test_identity(self, n):
        assert NumericMatrix.identity(n).determinant() == 1.0

    def test_two_by_two(self):
        m = NumericMatrix.from_rows([[2, 1], [1, 1]])
        result = m.determinant()
        assert result == 1.0
        assert isinstance(result, float)

    def test_three_by_three(self, square_3x3):
        assert square_3x3.determinant() == -3.0

    def test_permutation_sign(self):
        assert NumericMatrix.from_rows([[0, 1], [1, 0]]).determinant() == -1.0

    def test_zero_leading_entry(self):
        m = NumericMatrix.from_rows([[0, 2, 1], [1, 1, 1], [2, 0, 3]])
        # 0*(3-0) - 2*(3-2) + 1*(0-2) = -4
        assert m.determinant() == pytest.approx(-4.0, rel=1e-15)

    def test_singular(self, singular_3x3):
        assert singular_3x3.determinant() == 0.0

    def test_zero_row_gives_positive_zero(self):
        result = NumericMatrix.from_rows([[0, 0], [1, 2]]).determinant()
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_one_by_one(self):
        assert NumericMatrix.from_rows([[5]]).determinant() == 5.0
        assert NumericMatrix.from_rows([[-0.25]]).determinant() == -0.25
        assert NumericMatrix.from_rows([[0]]).determinant() == 0.0

    def test_fractional_entries(self):
        m = NumericMatrix.from_rows([[0.1, 0.2], [0.3, 0.4]])
        assert m.determinant() == pytest.approx(-0.02, rel=1e-15)

    def test_non_square(self):
        m = NumericMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(NonSquareMatrixError) as exc_info:
            m.determinant()
        assert exc_info.value.n_rows == 2
        assert exc_info.value.n_columns == 3

    def test_empty(self):
        with pytest.raises(NonSquareMatrixError):
            NumericMatrix().determinant()

    def test_input_not_mutated(self):
        rows = [[0, 1, 2], [3, 4, 5], [6, 7, 9]]
        m = NumericMatrix.from_rows(rows)
        m.determinant()
        assert m == Matrix(rows)

    def test_large_values_overflow_warns(self):
        m = NumericMatrix.from_rows([[Decimal('1e200'), 0], [0, Decimal('1e200')]])
        with pytest.warns(RuntimeWarning):
            assert m.determinant() == math.inf


class TestPolicy:

    def test_coarse_division_changes_result(self):
        """alpha = 1/3 rounded to 0.33 leaves a residue in the second row."""
        coarse = DecimalPolicy(
            division_places=2,
            rounding=ROUND_HALF_UP,
            zero_snap=Decimal('1e-15'),
            name='coarse',
        )
        m = NumericMatrix.from_rows([[3, 1], [1, 1]])
        assert m.determinant() == pytest.approx(2.0, rel=1e-15)
        assert m.determinant(policy=coarse) == pytest.approx(2.01, rel=1e-15)
