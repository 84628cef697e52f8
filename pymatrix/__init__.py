"""
pymatrix: dense matrices and linear algebra for Python.

Immutable matrices and vectors over exact (int, Fraction) or floating
point (real, complex) elements, with Gaussian elimination at the core of
determinant, rank, inverse and linear solves.

Submodules:
    matrix: Matrix and Vector value types
    linalg: Elimination, determinant, rank, inverse, solve
    core: Fields, exceptions, validation, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.matrix import Matrix, Vector, approx_eq
from pymatrix.linalg import (
    eliminate,
    determinant,
    rank,
    inverse,
    solve,
    solve_system,
)

__all__ = [
    "__version__",
    # Types
    "Matrix",
    "Vector",
    # Operations
    "approx_eq",
    "eliminate",
    "determinant",
    "rank",
    "inverse",
    "solve",
    "solve_system",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MatrixIndexError",
    "NumericalError",
    "SingularMatrixError",
]
