"""
Decimal arithmetic substrate.

Every element-wise step of vector and matrix arithmetic goes through this
module so that chained operations (elimination passes, long dot products)
accumulate no binary floating-point error.

Conventions:
    - add/subtract/multiply are exact: they run in an unbounded-precision
      context and never round
    - divide rounds to a fixed number of fractional digits (default 20,
      half-up) because exact quotients are not always representable
    - floats enter through their shortest repr, so 0.1 becomes Decimal('0.1')
      rather than the binary expansion of 0.1
    - floats leave through to_float(), which warns when the value does not
      survive the conversion
"""

import math
import numbers
import warnings
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Overflow,
)
from typing import Any, Iterable

from pymatrices.core.compute.tolerances import DEFAULT_POLICY
from pymatrices.core.exceptions import InvalidElementError

# Exact arithmetic: with MAX_PREC no sum or product of finite decimals is
# ever rounded. Division must not use this context.
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

ZERO = Decimal(0)
ONE = Decimal(1)


def to_decimal(value: Any, position: int | None = None) -> Decimal:
    """
    Convert a real number to Decimal.

    Accepts int, float, Decimal and numpy integer/floating scalars. Floats
    are read through repr() so the decimal matches the printed value.

    Args:
        value: Number to convert
        position: Index of the value inside its row, for error messages

    Returns:
        Finite Decimal

    Raises:
        InvalidElementError: For None, bool, non-numeric input, NaN or Inf
    """
    where = f" at position {position}" if position is not None else ""

    if value is None:
        raise InvalidElementError(
            f"Empty cell{where}: numeric containers do not accept None",
            value=value, position=position,
        )
    # bool is an Integral; a truth value is not a matrix element
    if isinstance(value, bool):
        raise InvalidElementError(
            f"Boolean{where} is not a real number: {value!r}",
            value=value, position=position,
        )

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        as_float = float(value)
        if not math.isfinite(as_float):
            raise InvalidElementError(
                f"Non-finite value{where}: {value!r}",
                value=value, position=position,
            )
        result = Decimal(repr(as_float))
    else:
        raise InvalidElementError(
            f"Value{where} is not a real number: {value!r} "
            f"({type(value).__name__})",
            value=value, position=position,
        )

    if not result.is_finite():
        raise InvalidElementError(
            f"Non-finite value{where}: {value!r}",
            value=value, position=position,
        )
    return result


def add(a: Decimal, b: Decimal) -> Decimal:
    """Exact a + b."""
    return EXACT_CONTEXT.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Exact a - b."""
    return EXACT_CONTEXT.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    """Exact a * b."""
    return EXACT_CONTEXT.multiply(a, b)


def negate(a: Decimal) -> Decimal:
    """Exact -a."""
    return EXACT_CONTEXT.minus(a)


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Exact sum of decimals (0 for an empty iterable)."""
    total = ZERO
    for value in values:
        total = EXACT_CONTEXT.add(total, value)
    return total


def exact_product(values: Iterable[Decimal], start: Decimal = ONE) -> Decimal:
    """Exact product of decimals, seeded with start."""
    total = start
    for value in values:
        total = EXACT_CONTEXT.multiply(total, value)
    return total


def divide(
    a: Decimal,
    b: Decimal,
    places: int = DEFAULT_POLICY.division_places,
    rounding: str = DEFAULT_POLICY.rounding,
) -> Decimal:
    """
    Divide a by b, rounding once to a fixed number of fractional digits.

    The quotient is computed as an exact integer ratio and rounded a single
    time, so no double rounding can occur.

    Args:
        a: Dividend
        b: Divisor
        places: Fractional digits kept in the result
        rounding: A decimal rounding mode (ROUND_HALF_UP by default)

    Returns:
        Decimal with exactly `places` fractional digits

    Raises:
        ZeroDivisionError: If b is zero
    """
    if is_zero(b):
        raise ZeroDivisionError(f"Decimal division by zero ({a} / {b})")

    num_a, den_a = a.as_integer_ratio()
    num_b, den_b = b.as_integer_ratio()
    numerator = num_a * den_b
    denominator = den_a * num_b
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    sign = '-' if numerator < 0 else ''
    whole, remainder = divmod(abs(numerator) * 10 ** places, denominator)

    # Encode the discarded remainder as .25/.5/.75 so quantize() sees the
    # same below/at/above-half information as the exact quotient.
    if remainder == 0:
        tail = '0'
    elif 2 * remainder < denominator:
        tail = '25'
    elif 2 * remainder == denominator:
        tail = '5'
    else:
        tail = '75'

    rounded = Decimal(f"{sign}{whole}.{tail}").quantize(
        ONE, rounding=rounding, context=EXACT_CONTEXT
    )
    return rounded.scaleb(-places, context=EXACT_CONTEXT)


def snap_to_zero(
    value: Decimal,
    threshold: Decimal = DEFAULT_POLICY.zero_snap,
) -> Decimal:
    """Return exact zero when |value| <= threshold, else value unchanged."""
    if EXACT_CONTEXT.abs(value) <= threshold:
        return ZERO
    return value


def is_zero(value: Decimal) -> bool:
    """True if value is numerically zero (any scale, either sign)."""
    return value == 0


def to_float(value: Decimal, name: str = "value") -> float:
    """
    Convert a Decimal result to float for external consumption.

    Args:
        value: Decimal to convert
        name: Description of the value for the warning message

    Returns:
        Nearest float

    Warns:
        RuntimeWarning: If a non-zero value overflows to Inf or underflows
            to zero
    """
    result = float(value)
    if math.isinf(result):
        warnings.warn(
            f"{name} {value:.6E} exceeds the float range; returning {result}",
            RuntimeWarning,
            stacklevel=2,
        )
    elif result == 0.0 and not is_zero(value):
        warnings.warn(
            f"{name} {value:.6E} underflows to 0.0 as a float",
            RuntimeWarning,
            stacklevel=2,
        )
    return result
