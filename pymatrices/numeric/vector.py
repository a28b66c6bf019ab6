"""
NumericVector: an immutable sequence of real numbers stored as Decimals.

The module-level functions accept any sequence of real numbers (lists,
tuples, 1D numpy arrays, NumericVectors); the NumericVector methods are thin
wrappers around them. Every arithmetic step goes through the decimal
substrate.

Binary operations require equal lengths and raise
IncompatibleVectorSizeError otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.compute import decimal_ops
from pymatrices.core.compute.tolerances import DEFAULT_POLICY
from pymatrices.core.exceptions import (
    IncompatibleVectorSizeError,
    InvalidElementError,
    UnsupportedOperationError,
    ValidationError,
)
from pymatrices.core.validation import check_numeric_row, check_real_number


def _as_decimals(v: Any) -> tuple[Decimal, ...]:
    """Decimal view of a vector-like argument."""
    if isinstance(v, NumericVector):
        return v._values
    return tuple(check_numeric_row(v, "vector"))


def _check_same_length(a: tuple[Decimal, ...], b: tuple[Decimal, ...]) -> None:
    if len(a) != len(b):
        raise IncompatibleVectorSizeError(expected=len(a), actual=len(b))


def validate_operation_compatibility(v1: Any, v2: Any) -> bool:
    """True if the two vectors have the same length."""
    return len(_as_decimals(v1)) == len(_as_decimals(v2))


def index_first_nonzero(v: Any) -> int:
    """
    Index of the first non-zero element, or -1 if every element is zero.

    Comparison is numeric: Decimal('0E-20') and -0.0 count as zero.
    """
    for i, value in enumerate(_as_decimals(v)):
        if not decimal_ops.is_zero(value):
            return i
    return -1


def scalar_multiplication(v: Any, alpha: Any) -> NumericVector:
    """Exact elementwise v[i] * alpha."""
    multiplier = check_real_number(alpha)
    return NumericVector._wrap(
        tuple(decimal_ops.multiply(x, multiplier) for x in _as_decimals(v))
    )


def _combine(
    v1: Any,
    v2: Any,
    alpha: Any,
    threshold: Decimal = DEFAULT_POLICY.zero_snap,
) -> NumericVector:
    """
    Elementwise v1[i] + alpha * v2[i], snapping |x| <= threshold to zero.

    alpha = 1 is addition, alpha = -1 is subtraction. The snap absorbs the
    residue left by rounded division in elimination steps.

    Raises:
        IncompatibleVectorSizeError: If the lengths differ
    """
    a, b = _as_decimals(v1), _as_decimals(v2)
    _check_same_length(a, b)
    multiplier = check_real_number(alpha)
    return NumericVector._wrap(tuple(
        decimal_ops.snap_to_zero(
            decimal_ops.add(x, decimal_ops.multiply(y, multiplier)), threshold
        )
        for x, y in zip(a, b)
    ))


def add(v1: Any, v2: Any) -> NumericVector:
    """v1 + v2."""
    return _combine(v1, v2, 1)


def subtract(v1: Any, v2: Any) -> NumericVector:
    """v1 - v2."""
    return _combine(v1, v2, -1)


def _dot_exact(v1: Any, v2: Any) -> Decimal:
    """Exact dot product, kept as Decimal for internal callers."""
    a, b = _as_decimals(v1), _as_decimals(v2)
    _check_same_length(a, b)
    return decimal_ops.exact_sum(decimal_ops.multiply(x, y) for x, y in zip(a, b))


def dot_product(v1: Any, v2: Any) -> float:
    """
    Dot product of two vectors.

    The sum of products is accumulated exactly; only the returned float is
    rounded.

    Raises:
        IncompatibleVectorSizeError: If the lengths differ
    """
    return decimal_ops.to_float(_dot_exact(v1, v2), "dot product")


def is_perpendicular(v1: Any, v2: Any) -> bool:
    """True iff the lengths match and the dot product is exactly zero."""
    a, b = _as_decimals(v1), _as_decimals(v2)
    return len(a) == len(b) and decimal_ops.is_zero(_dot_exact(a, b))


def cross_product(v1: Any, v2: Any) -> NumericVector:
    """
    Cross product of two 3-dimensional vectors.

    Raises:
        UnsupportedOperationError: If either vector is not of length 3
    """
    a, b = _as_decimals(v1), _as_decimals(v2)
    if len(a) != 3 or len(b) != 3:
        raise UnsupportedOperationError(
            f"Two vectors of size 3 are expected on cross product, "
            f"got sizes {len(a)} and {len(b)}.",
            operation="cross_product",
        )

    mul, sub = decimal_ops.multiply, decimal_ops.subtract
    return NumericVector._wrap((
        sub(mul(a[1], b[2]), mul(a[2], b[1])),
        decimal_ops.negate(sub(mul(a[0], b[2]), mul(a[2], b[0]))),
        sub(mul(a[0], b[1]), mul(a[1], b[0])),
    ))


class NumericVector(Sequence):
    """
    Immutable vector of Decimals.

    Construction:
        NumericVector([1, 2.5, Decimal('3')])
        NumericVector(np.array([1.0, 2.0]))
        NumericVector.zeros(3)
        NumericVector.unit(3, 0)        # [1, 0, 0]

    Floats are read through their repr, so NumericVector([0.1])[0] is
    Decimal('0.1').
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[Any] = ()):
        self._values: tuple[Decimal, ...] = _as_decimals(values)

    @classmethod
    def _wrap(cls, values: tuple[Decimal, ...]) -> NumericVector:
        """Build from already-validated Decimals."""
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    @classmethod
    def zeros(cls, n: int) -> NumericVector:
        """Vector of n zeros."""
        if n < 0:
            raise ValidationError(f"n: must be non-negative, got {n}")
        return cls._wrap((decimal_ops.ZERO,) * n)

    @classmethod
    def unit(cls, n: int, index: int) -> NumericVector:
        """Vector of length n with a one at index and zeros elsewhere."""
        if not 0 <= index < n:
            raise ValidationError(f"index: {index} out of range for size {n}")
        values = [decimal_ops.ZERO] * n
        values[index] = decimal_ops.ONE
        return cls._wrap(tuple(values))

    # --- Vector operations ---

    def scalar_multiplication(self, alpha: Any) -> NumericVector:
        return scalar_multiplication(self, alpha)

    def add(self, other: Any) -> NumericVector:
        return add(self, other)

    def subtract(self, other: Any) -> NumericVector:
        return subtract(self, other)

    def dot_product(self, other: Any) -> float:
        return dot_product(self, other)

    def cross_product(self, other: Any) -> NumericVector:
        return cross_product(self, other)

    def is_perpendicular(self, other: Any) -> bool:
        return is_perpendicular(self, other)

    def index_first_nonzero(self) -> int:
        return index_first_nonzero(self)

    def validate_operation_compatibility(self, other: Any) -> bool:
        return validate_operation_compatibility(self, other)

    def to_numpy(self) -> NDArray[np.float64]:
        """Float64 copy of the vector."""
        return np.array([float(x) for x in self._values], dtype=np.float64)

    # --- Python protocol ---

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return NumericVector._wrap(self._values[index])
        return self._values[index]

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._values)

    def __add__(self, other: Any) -> NumericVector:
        if isinstance(other, (str, bytes)) or not hasattr(other, '__iter__'):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> NumericVector:
        if isinstance(other, (str, bytes)) or not hasattr(other, '__iter__'):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Any) -> NumericVector:
        if isinstance(other, (str, bytes)) or not hasattr(other, '__iter__'):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: Any) -> NumericVector:
        if isinstance(other, (str, bytes)) or not hasattr(other, '__iter__'):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, alpha: Any) -> NumericVector:
        if hasattr(alpha, '__iter__'):
            return NotImplemented
        return scalar_multiplication(self, alpha)

    __rmul__ = __mul__

    def __neg__(self) -> NumericVector:
        return scalar_multiplication(self, -1)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NumericVector):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            try:
                return self._values == _as_decimals(other)
            except InvalidElementError:
                return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self._values) + "]"

    def __repr__(self) -> str:
        return f"NumericVector({self})"
