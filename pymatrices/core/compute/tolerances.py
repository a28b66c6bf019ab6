"""
Numeric policy for decimal arithmetic and float comparison.

Two kinds of constants live here:
- DecimalPolicy: how the decimal substrate divides and when it snaps
  rounding residue to exact zero. The elimination step of the determinant
  depends on these values.
- ToleranceTier: float comparison tolerances for results that leave the
  decimal domain (determinants, dot products), used by the test suite and
  by reference comparisons against numpy/scipy.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP


@dataclass(frozen=True)
class DecimalPolicy:
    """Division scale, rounding mode and zero-snap threshold."""
    division_places: int
    rounding: str
    zero_snap: Decimal
    name: str


# 20 fractional digits, half-up. Values with |x| <= 1e-15 after a
# combination step are treated as exact zero.
DEFAULT_POLICY = DecimalPolicy(
    division_places=20,
    rounding=ROUND_HALF_UP,
    zero_snap=Decimal('1e-15'),
    name='decimal_20_half_up',
)

DIVISION_PLACES = DEFAULT_POLICY.division_places
ZERO_SNAP_THRESHOLD = DEFAULT_POLICY.zero_snap


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact decimal path compared against itself or against integers
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Decimal results with integer-valued inputs',
)

# Decimal result compared with a LAPACK float64 reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Decimal elimination vs float64 LU reference',
)

# Chained products where each step rounds a 20-digit quotient
CHAINED = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='chained',
    description='Results built from several rounded divisions',
)


def select_tolerance(n_divisions: int) -> ToleranceTier:
    """Select a tolerance tier for a result built from n rounded divisions."""
    if n_divisions == 0:
        return EXACT
    if n_divisions == 1:
        return CPU_FP64
    return CHAINED
