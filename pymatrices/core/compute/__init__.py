"""
Shared compute infrastructure for pymatrices.

Submodules:
    decimal_ops: Exact decimal arithmetic substrate
    tolerances: Division/zero-snap policy and float comparison tiers
    timing: Execution timing utilities
"""

from pymatrices.core.compute.tolerances import (
    DEFAULT_POLICY,
    DIVISION_PLACES,
    ZERO_SNAP_THRESHOLD,
    DecimalPolicy,
    ToleranceTier,
)
from pymatrices.core.compute.timing import Timer, timed

__all__ = [
    # Policy
    "DEFAULT_POLICY",
    "DIVISION_PLACES",
    "ZERO_SNAP_THRESHOLD",
    "DecimalPolicy",
    "ToleranceTier",
    # Timing
    "Timer",
    "timed",
]
