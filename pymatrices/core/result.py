"""
Generic result container for pymatrices computations.

Solvers that report more than a single number (row-echelon reduction, for
example) wrap their payload in a Result so that timing, method metadata and
non-fatal warnings travel with it.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, swap counts, pivots)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The computation-specific parameter payload type

    Attributes:
        params: Computation-specific payload (reduced matrix, swap count, ...)
        info: Structured metadata (method, policy name, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EchelonParams(matrix=reduced, swaps=1, pivots=(0, 1)),
        ...     info={'method': 'gaussian_elimination', 'policy': 'decimal_20_half_up'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='decimal_echelon',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
