"""
Linear system design.

LinearSystem validates and holds the coefficient matrix `a` and right-hand
side `b` of a · x = b. It knows it is describing a square system; the
backends that solve it don't re-check shapes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatrix.core.fields import ScalarField, common_field
from pymatrix.core.validation import check_same_rows, check_square
from pymatrix.matrix import Matrix, Vector, as_matrix


@dataclass(frozen=True)
class LinearSystem:
    """
    Square linear system a · x = b.

    Immutable after construction; `a` and `b` share one field.

    Construction:
        LinearSystem.build(a, b)        # b: Matrix, Vector, nested rows or flat values
    """
    _a: Matrix
    _b: Matrix
    _field: ScalarField

    @classmethod
    def build(cls, a: Any, b: Any) -> LinearSystem:
        """
        Validate and build a system.

        Raises:
            DimensionError: If a is not square or b.rows != a.rows
            ValidationError: If either operand holds non-numeric data
        """
        a = as_matrix(a, 'a')
        b = as_rhs(b)
        check_square(a, 'a', 'solve')
        check_same_rows(a, b, ('a', 'b'), 'solve')
        field = common_field(a.field, b.field)
        return cls(_a=a.astype(field), _b=b.astype(field), _field=field)

    # === Properties ===

    @property
    def a(self) -> Matrix:
        """Coefficient matrix (n x n)."""
        return self._a

    @property
    def b(self) -> Matrix:
        """Right-hand side (n x k)."""
        return self._b

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._a.rows

    @property
    def n_rhs(self) -> int:
        """Number of right-hand-side columns."""
        return self._b.cols

    @property
    def field(self) -> ScalarField:
        return self._field

    @property
    def rhs_is_vector(self) -> bool:
        return isinstance(self._b, Vector)

    def wrap_solution(self, x: np.ndarray) -> Matrix:
        """Solution array as a Vector when b was a Vector, else a Matrix."""
        result_type = Vector if self.rhs_is_vector else Matrix
        return result_type._new(x, self._field)


def as_rhs(value: Any) -> Matrix:
    """
    Right-hand side passthrough / conversion.

    Flat sequences and 1D arrays become a Vector; nested rows and 2D
    arrays become a Matrix.
    """
    if isinstance(value, Matrix):
        return value
    if isinstance(value, np.ndarray) and value.ndim == 1:
        return Vector.from_values(value)
    if (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) > 0
        and not isinstance(value[0], (Sequence, np.ndarray))
    ):
        return Vector.from_values(value)
    return as_matrix(value, 'b')
