"""
Tests for NumericVector and the vector functions.

Validates:
    - Construction from lists, numpy arrays and Decimals; rejected cells
    - Exact arithmetic: no binary floating-point error in add/subtract
    - Zero snapping of combination results
    - Dot product, perpendicularity, cross product (length 3 only)
    - index_first_nonzero, length checks, operators and equality
"""

from decimal import Decimal

import numpy as np
import pytest

from pymatrices.core.exceptions import (
    IncompatibleVectorSizeError,
    InvalidElementError,
    UnsupportedOperationError,
    ValidationError,
)
from pymatrices.numeric.vector import (
    NumericVector,
    add,
    cross_product,
    dot_product,
    index_first_nonzero,
    is_perpendicular,
    scalar_multiplication,
    subtract,
    validate_operation_compatibility,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_list(self):
        v = NumericVector([1, 2.5, Decimal('3')])
        assert list(v) == [Decimal(1), Decimal('2.5'), Decimal(3)]
        assert len(v) == 3

    def test_from_numpy(self):
        v = NumericVector(np.array([0.1, 0.2]))
        assert v[0] == Decimal('0.1')

    def test_empty(self):
        assert len(NumericVector()) == 0

    @pytest.mark.parametrize("row", [[1, None], [1, "2"], [True], [float('nan')]])
    def test_invalid_cells_rejected(self, row):
        with pytest.raises(InvalidElementError):
            NumericVector(row)

    def test_non_sequence_rejected(self):
        with pytest.raises(ValidationError):
            NumericVector(5)

    def test_zeros_and_unit(self):
        assert NumericVector.zeros(3) == [0, 0, 0]
        assert NumericVector.unit(3, 1) == [0, 1, 0]
        with pytest.raises(ValidationError):
            NumericVector.unit(3, 3)
        with pytest.raises(ValidationError):
            NumericVector.zeros(-1)


# ═══════════════════════════════════════════════════════════════════════
# Addition and subtraction
# ═══════════════════════════════════════════════════════════════════════


class TestCombination:

    def test_add_is_exact(self):
        assert add([0.1], [0.2]) == [Decimal('0.3')]

    def test_subtract(self):
        assert subtract([5, 3], [2, 4]) == [3, -1]

    def test_length_mismatch(self):
        with pytest.raises(IncompatibleVectorSizeError) as exc_info:
            add([1, 2], [1, 2, 3])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_results_below_threshold_snap_to_zero(self):
        result = add([Decimal('1e-16'), Decimal('1')], [0, Decimal('1e-16')])
        assert result[0] == 0
        assert result[1] == Decimal('1.0000000000000001')

    def test_threshold_value_itself_snaps(self):
        assert subtract([Decimal('1e-15')], [0]) == [0]

    def test_operators(self):
        v = NumericVector([1, 2])
        assert v + [1, 1] == [2, 3]
        assert [1, 1] + v == [2, 3]
        assert v - [1, 1] == [0, 1]
        assert [5, 5] - v == [4, 3]
        assert -v == [-1, -2]

    def test_operands_not_mutated(self):
        v1 = NumericVector([1, 2])
        v2 = NumericVector([3, 4])
        v1 + v2
        assert v1 == [1, 2]
        assert v2 == [3, 4]


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestProducts:

    def test_scalar_multiplication(self):
        assert scalar_multiplication([1, 2.5], 2) == [2, 5]
        v = NumericVector([1, 2])
        assert v * 3 == [3, 6]
        assert 3 * v == [3, 6]

    def test_dot_product(self):
        result = dot_product([1, 2, 3], [4, 5, 6])
        assert result == 32.0
        assert isinstance(result, float)

    def test_dot_product_exact_accumulation(self):
        assert dot_product([0.1] * 10, [1] * 10) == 1.0

    def test_dot_product_length_mismatch(self):
        with pytest.raises(IncompatibleVectorSizeError):
            dot_product([1, 2], [1])

    def test_is_perpendicular(self):
        assert is_perpendicular([1, 0], [0, 1])
        assert is_perpendicular([1, 1], [1, -1])
        assert is_perpendicular([0.5, 0.25], [-0.5, 1])
        assert not is_perpendicular([1, 1], [1, 0])
        assert not is_perpendicular([1, 0], [0, 1, 0])

    def test_cross_product_basis(self):
        assert cross_product([1, 0, 0], [0, 1, 0]) == [0, 0, 1]
        assert cross_product([0, 1, 0], [0, 0, 1]) == [1, 0, 0]

    def test_cross_product_general(self):
        assert cross_product([1, 2, 3], [4, 5, 6]) == [-3, 6, -3]

    def test_cross_product_is_perpendicular(self):
        a, b = [2, -1, 5], [0.5, 3, 1]
        c = cross_product(a, b)
        assert is_perpendicular(c, a)
        assert is_perpendicular(c, b)

    @pytest.mark.parametrize("a,b", [([1, 2], [3, 4]), ([1, 2, 3], [1, 2, 3, 4])])
    def test_cross_product_requires_length_three(self, a, b):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            cross_product(a, b)
        assert exc_info.value.operation == "cross_product"


# ═══════════════════════════════════════════════════════════════════════
# Queries and protocol
# ═══════════════════════════════════════════════════════════════════════


class TestQueries:

    @pytest.mark.parametrize("values,expected", [
        ([0, 0, 3], 2),
        ([4, 0], 0),
        ([0, 0], -1),
        ([], -1),
        ([Decimal('0E-20'), -0.0, Decimal('1e-30')], 2),
    ])
    def test_index_first_nonzero(self, values, expected):
        assert index_first_nonzero(values) == expected
        assert NumericVector(values).index_first_nonzero() == expected

    def test_validate_operation_compatibility(self):
        assert validate_operation_compatibility([1, 2], [3, 4])
        assert not NumericVector([1]).validate_operation_compatibility([1, 2])


class TestProtocol:

    def test_equality_is_numeric(self):
        assert NumericVector([1]) == NumericVector([Decimal('1.00')])
        assert NumericVector([1, 2]) == (1, 2)
        assert NumericVector([1, 2]) != [1, 2, 3]
        assert NumericVector([1]) != [None]

    def test_hash_consistent_with_equality(self):
        assert hash(NumericVector([1])) == hash(NumericVector([1.0]))

    def test_slice(self):
        v = NumericVector([1, 2, 3])
        assert isinstance(v[1:], NumericVector)
        assert v[1:] == [2, 3]
        assert v[-1] == 3

    def test_str_and_repr(self):
        v = NumericVector([1, 2.5])
        assert str(v) == "[1, 2.5]"
        assert repr(v) == "NumericVector([1, 2.5])"

    def test_to_numpy(self):
        arr = NumericVector([1, 0.5]).to_numpy()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 0.5])
