"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymatrix.core.result import Result
from pymatrix.matrix import Matrix, frobenius_norm

if TYPE_CHECKING:
    from pymatrix.linalg.design import LinearSystem


@dataclass(frozen=True)
class SolveParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends.
    """
    solution: Matrix
    rank: int
    pivot_sign: int
    pivot_ratio: float | None


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides the solution together with
    residual diagnostics and provenance (backend, timing, warnings).
    """
    _result: Result[SolveParams]
    _design: 'LinearSystem'

    # Cached computations
    _residual: Matrix | None = None

    @property
    def solution(self) -> Matrix:
        return self._result.params.solution

    @property
    def x(self) -> Matrix:
        """Alias for solution."""
        return self.solution

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def pivot_sign(self) -> int:
        return self._result.params.pivot_sign

    @property
    def pivot_ratio(self) -> float | None:
        """Smallest / largest pivot magnitude (None for exact fields)."""
        return self._result.params.pivot_ratio

    @property
    def residual(self) -> Matrix:
        """b - a · x, computed once."""
        if self._residual is None:
            self._residual = self._design.b - self._design.a @ self.solution
        return self._residual

    @property
    def residual_norm(self) -> float:
        """Frobenius norm of the residual."""
        return frobenius_norm(self.residual)

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text report of the solve."""
        design = self._design
        lines = [
            "Linear system solution",
            "=" * 40,
            f"Unknowns:        {design.n}",
            f"RHS columns:     {design.n_rhs}",
            f"Field:           {design.field.name}",
            f"Backend:         {self.backend_name}",
            f"Rank:            {self.rank}",
            f"Pivot sign:      {self.pivot_sign:+d}",
            f"Residual norm:   {self.residual_norm:.6g}",
        ]
        if self.pivot_ratio is not None:
            lines.append(f"Pivot ratio:     {self.pivot_ratio:.6g}")
        if self.timing is not None:
            lines.append(f"Time (s):        {self.timing['total_seconds']:.6f}")
        lines.append("")
        lines.append("Solution:")
        lines.append(self.solution.format())
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self._design.n}, "
            f"backend={self.backend_name!r}, residual_norm={self.residual_norm:.3g})"
        )
