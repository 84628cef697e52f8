"""
Gaussian elimination with partial pivoting.

This is the single shared primitive behind determinant, rank, inverse and
solve. The forward pass works in place on a field "working" array:

    - at column c, pick the row at/below the current pivot row with the
      largest magnitude (first on ties), swap it up, flip the pivot sign
    - if every candidate is zero (exactly, or within tolerance for inexact
      fields) the column is skipped and its remaining entries set to zero
    - otherwise eliminate everything below the pivot

Augmented systems [A | B] run the same forward pass with pivoting
restricted to A's columns, then a Jordan back-substitution reduces A to
the identity so that the right block holds the solution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.fields import ScalarField
from pymatrix.matrix import Matrix, as_matrix


@dataclass(frozen=True)
class EliminationResult:
    """
    Row-echelon reduction of a matrix.

    Attributes:
        echelon: Row-echelon form (same shape and field as the input)
        pivot_sign: +1 or -1, flipped once per row swap
        rank: Number of pivots found
        pivot_columns: Column index of each pivot, in row order
        tolerance: Zero threshold used (0.0 for exact fields)
    """
    echelon: Matrix
    pivot_sign: int
    rank: int
    pivot_columns: tuple[int, ...]
    tolerance: float

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self.echelon.shape)


@dataclass(frozen=True)
class AugmentedReduction:
    """
    Forward-eliminated augmented array [A | B].

    Attributes:
        work: Working array, n x (n + k), modified in place by back_substitute
        n: Number of columns belonging to A
        rank: Pivots found among A's columns
        pivot_sign: +1 or -1
        pivot_columns: Pivot column per row
        pivot_magnitudes: |pivot| per row, before back substitution
        tolerance: Zero threshold used
    """
    work: NDArray
    n: int
    rank: int
    pivot_sign: int
    pivot_columns: tuple[int, ...]
    pivot_magnitudes: tuple[float, ...]
    tolerance: float

    @property
    def pivot_ratio(self) -> float | None:
        """Smallest / largest pivot magnitude, None without pivots."""
        if not self.pivot_magnitudes:
            return None
        largest = max(self.pivot_magnitudes)
        return min(self.pivot_magnitudes) / largest if largest else None


def eliminate(m: Any, *, atol: float | None = None) -> EliminationResult:
    """
    Reduce a matrix to row-echelon form with partial pivoting.

    Never fails on a well-formed matrix: rank-deficient columns are skipped,
    and rank < min(rows, cols) signals singularity to the caller.

    Args:
        m: Matrix (or nested sequence) to reduce
        atol: Zero threshold for inexact fields. Defaults to
            max(rows, cols) * eps * max|m|. Ignored for exact fields.

    Returns:
        EliminationResult with echelon form, pivot sign and rank
    """
    m = as_matrix(m, 'm')
    field = m.field
    work = field.working(m.array)
    tol = _resolve_tolerance(field, work, atol)
    sign, pivots, _ = _forward(work, field, m.cols, tol)
    return EliminationResult(
        echelon=Matrix._new(field.normalize(work), field),
        pivot_sign=sign,
        rank=len(pivots),
        pivot_columns=tuple(pivots),
        tolerance=tol,
    )


def reduce_augmented(
    left: NDArray,
    right: NDArray,
    field: ScalarField,
    *,
    atol: float | None = None,
) -> AugmentedReduction:
    """
    Forward elimination of [left | right], pivoting only on left's columns.

    Both arrays must already be in `field` storage and have equal row counts.
    """
    n = left.shape[1]
    left_work = field.working(left)
    tol = _resolve_tolerance(field, left_work, atol)
    work = np.hstack([left_work, field.working(right)])
    sign, pivots, magnitudes = _forward(work, field, n, tol)
    return AugmentedReduction(
        work=work,
        n=n,
        rank=len(pivots),
        pivot_sign=sign,
        pivot_columns=tuple(pivots),
        pivot_magnitudes=tuple(magnitudes),
        tolerance=tol,
    )


def back_substitute(reduction: AugmentedReduction, field: ScalarField) -> NDArray:
    """
    Jordan step: scale each pivot to one and clear the entries above it.

    Requires a full-rank reduction (rank == n); returns the right block,
    normalized into field storage.
    """
    work = reduction.work
    for r in reversed(range(reduction.rank)):
        c = reduction.pivot_columns[r]
        work[r, :] = work[r, :] / work[r, c]
        work[r, c] = field.one
        if r > 0:
            factors = work[:r, c].copy()
            work[:r, :] -= np.outer(factors, work[r, :])
            work[:r, c] = field.zero
    return field.normalize(work[:, reduction.n:])


def _forward(
    work: NDArray,
    field: ScalarField,
    n_cols: int,
    tol: float,
) -> tuple[int, list[int], list[float]]:
    rows = work.shape[0]
    sign = 1
    pivots: list[int] = []
    magnitudes: list[float] = []
    r = 0
    for c in range(n_cols):
        if r == rows:
            break
        p = r + field.pivot_index(work[r:, c])
        if field.is_zero(work[p, c], tol):
            work[r:, c] = field.zero
            continue
        if p != r:
            work[[r, p]] = work[[p, r]]
            sign = -sign
        pivot = work[r, c]
        if r + 1 < rows:
            factors = work[r + 1:, c] / pivot
            work[r + 1:, c:] -= np.outer(factors, work[r, c:])
            work[r + 1:, c] = field.zero
        pivots.append(c)
        magnitudes.append(float(abs(pivot)))
        r += 1
    return sign, pivots, magnitudes


def _resolve_tolerance(field: ScalarField, work: NDArray, atol: float | None) -> float:
    if field.exact:
        return 0.0
    if atol is None:
        return field.tolerance_for(work)
    if atol < 0:
        raise ValidationError(f"atol: must be non-negative, got {atol}")
    return float(atol)
