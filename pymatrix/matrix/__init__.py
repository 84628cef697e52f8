"""
Dense matrix and vector value types.

Public API:
    Matrix: immutable row-major matrix over a scalar field
    Vector: single-column Matrix
    as_matrix(value): Matrix passthrough / conversion of nested sequences
    approx_eq(a, b, epsilon): tolerance comparison

Example:
    >>> from pymatrix.matrix import Matrix
    >>> m = Matrix.from_rows([[1, 2], [3, 4]])
    >>> print(m @ m.T)
     5 11
    11 25
"""

from pymatrix.matrix.matrix import Matrix, as_matrix, approx_eq, frobenius_norm
from pymatrix.matrix.vector import Vector
from pymatrix.matrix._format import DEFAULT_PRECISION

__all__ = [
    "Matrix",
    "Vector",
    "as_matrix",
    "approx_eq",
    "frobenius_norm",
    "DEFAULT_PRECISION",
]
