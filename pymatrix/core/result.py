"""
Generic result container for pymatrix computations.

The Result class is the envelope that detailed solvers return. It carries
the parameter payload together with timing, backend identity and
non-fatal warnings, so callers can inspect how a value was produced.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, pivot sign)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True), like every other value in the library
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed payload (solution matrix, rank, residual, ...)
        info: Structured metadata (method, rank, pivot sign)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SolveParams(solution=x, rank=3, pivot_sign=-1),
        ...     info={'method': 'gauss_jordan', 'rank': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss_jordan'
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
