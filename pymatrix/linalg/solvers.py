"""
Determinant, rank, inverse and linear solves.

Every routine here is a thin derivation over the shared elimination
primitive in _elimination. solve_system() additionally dispatches to a
backend and returns a LinearSystemSolution with diagnostics.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.protocols import Backend
from pymatrix.core.validation import check_square
from pymatrix.linalg._elimination import back_substitute, eliminate, reduce_augmented
from pymatrix.linalg.backends.cpu import CPUGaussJordanBackend, CPULUBackend
from pymatrix.linalg.design import LinearSystem
from pymatrix.linalg.solution import LinearSystemSolution
from pymatrix.matrix import Matrix, as_matrix


# Type alias for backend selection
BackendChoice = Literal['auto', 'gauss', 'lapack', 'cpu_gauss_jordan', 'cpu_lu']


def determinant(m: Any) -> Any:
    """
    Determinant as pivot_sign * product of the echelon diagonal.

    Returns a scalar of the matrix's field: int or Fraction for exact
    matrices, float or complex otherwise.

    Raises:
        DimensionError: If m is not square

    Example:
        >>> determinant([[1, 2], [3, 4]])
        -2
    """
    m = as_matrix(m, 'm')
    check_square(m, 'm', 'determinant')
    field = m.field
    reduced = eliminate(m)
    diagonal = reduced.echelon.array
    det = field.one
    for i in range(m.rows):
        det = det * diagonal[i, i]
    if reduced.pivot_sign < 0:
        det = -det
    return field.normalize_scalar(det)


def rank(m: Any, *, atol: float | None = None) -> int:
    """Number of pivots found by elimination."""
    return eliminate(m, atol=atol).rank


def inverse(m: Any, *, atol: float | None = None) -> Matrix:
    """
    Inverse by Gauss-Jordan elimination of [m | I].

    Exact matrices invert exactly (integer input yields Fractions where
    needed).

    Raises:
        DimensionError: If m is not square
        SingularMatrixError: If rank(m) < rows
    """
    m = as_matrix(m, 'm')
    check_square(m, 'm', 'inverse')
    field = m.field
    identity = Matrix.identity(m.rows, field=field)
    reduction = reduce_augmented(m.array, identity.array, field, atol=atol)
    if reduction.rank < m.rows:
        raise SingularMatrixError(
            f"Matrix is singular: rank={reduction.rank}, expected={m.rows}. "
            f"It has no inverse.",
            matrix_name='m',
            rank=reduction.rank,
            expected_rank=m.rows,
        )
    return Matrix._new(back_substitute(reduction, field), field)


def solve(a: Any, b: Any, *, atol: float | None = None) -> Matrix:
    """
    Solve a · x = b.

    Args:
        a: Square coefficient matrix
        b: Right-hand side with a.rows rows; a Vector or flat sequence
            gives a Vector solution, a Matrix gives one column per RHS
        atol: Zero threshold for pivots of inexact systems

    Raises:
        DimensionError: If a is not square or b.rows != a.rows
        SingularMatrixError: If a is singular

    Example:
        >>> solve([[2, 1], [1, 3]], [[3], [5]])
        Matrix.from_rows([[Fraction(4, 5)], [Fraction(7, 5)]])
    """
    design = LinearSystem.build(a, b)
    reduction = reduce_augmented(design.a.array, design.b.array, design.field, atol=atol)
    if reduction.rank < design.n:
        raise SingularMatrixError(
            f"Coefficient matrix is singular: rank={reduction.rank}, expected={design.n}. "
            f"The system has no unique solution.",
            matrix_name='a',
            rank=reduction.rank,
            expected_rank=design.n,
        )
    return design.wrap_solution(back_substitute(reduction, design.field))


def solve_system(
    a: Any,
    b: Any,
    *,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Solve a · x = b and report diagnostics.

    Args:
        a: Square coefficient matrix
        b: Right-hand side
        backend: Computational backend to use:
            - 'auto': Gauss-Jordan reference backend
            - 'gauss' / 'cpu_gauss_jordan': Gauss-Jordan, any field
            - 'lapack' / 'cpu_lu': SciPy LU, float and complex only

    Returns:
        LinearSystemSolution with solution, residual, timing and warnings

    Raises:
        DimensionError: If shapes are incompatible
        SingularMatrixError: If a is singular
        ValidationError: If 'lapack' is requested for an exact system
        ValueError: If the backend name is unknown
    """
    # === Construct Design ===
    design = LinearSystem.build(a, b)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSystemSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend:
    """
    Instantiate the backend for a user choice.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'gauss', 'cpu_gauss_jordan'):
        return CPUGaussJordanBackend()
    elif choice in ('lapack', 'cpu_lu'):
        return CPULUBackend()
    else:
        raise ValueError(f"Unknown backend: {choice!r}")


def condition_estimate(m: Any) -> float:
    """
    2-norm condition number of an inexact-castable square matrix.

    Uses singular values of the float64 (or complex) copy. Returns inf
    for singular matrices.

    Raises:
        DimensionError: If m is not square
    """
    m = as_matrix(m, 'm')
    check_square(m, 'm', 'condition_estimate')
    array = m.array if not m.field.exact else np.asarray(m.array, dtype=np.float64)
    singular_values = np.linalg.svd(array, compute_uv=False)
    smallest = singular_values[-1]
    if smallest == 0:
        return float('inf')
    return float(singular_values[0] / smallest)
