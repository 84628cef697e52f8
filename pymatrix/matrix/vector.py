"""
Column vector type.

A Vector is a Matrix fixed to a single column. Every Matrix operation
applies unchanged; shape-preserving operations (add, sub, scale, set, ...)
return a Vector, as do `matrix @ vector` and `solve(a, vector)`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.fields import ScalarField, common_field
from pymatrix.core.validation import check_axis_index
from pymatrix.matrix.matrix import FieldLike, Matrix, frobenius_norm


class Vector(Matrix):
    """
    Immutable n x 1 column vector.

    Construction:
        Vector.from_values([1, 2, 3])
        Vector.zeros(3)
        Vector.basis(3, 0)
        Vector.from_matrix(m.column(0))
    """

    __slots__ = ()

    def __init__(self, data: NDArray, field: ScalarField):
        super().__init__(data, field)
        if self.cols != 1:
            raise DimensionError(
                f"Vector must have exactly one column, got {self.rows}x{self.cols}",
                expected=(self.rows, 1),
                actual=self.shape,
            )

    @classmethod
    def from_values(
        cls,
        values: Sequence[Any] | NDArray,
        *,
        field: FieldLike | None = None,
    ) -> Vector:
        """
        Build from a flat sequence of scalars.

        Raises:
            DimensionError: If values is empty or not flat
        """
        if isinstance(values, np.ndarray):
            if values.ndim == 2 and values.shape[1] == 1:
                values = values.ravel()
            if values.ndim != 1:
                raise DimensionError(
                    f"values: expected a flat 1D sequence, got shape {values.shape}"
                )
            length = values.shape[0]
        elif isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise DimensionError(
                f"values: expected a flat sequence, got {type(values).__name__}"
            )
        else:
            length = len(values)
        if length == 0:
            raise DimensionError("values: a vector needs at least one element, got 0")
        return cls.from_flat(values, length, 1, field=field)

    @classmethod
    def from_matrix(cls, m: Matrix) -> Vector:
        """
        View a single-column Matrix as a Vector.

        Raises:
            DimensionError: If m has more than one column
        """
        if isinstance(m, Vector):
            return m
        return cls(m.array, m.field)

    @classmethod
    def zeros(cls, n: int, *, field: FieldLike | None = None) -> Vector:
        return super().zeros(n, 1, field=field)

    @classmethod
    def ones(cls, n: int, *, field: FieldLike | None = None) -> Vector:
        return super().ones(n, 1, field=field)

    @classmethod
    def basis(cls, n: int, i: int, *, field: FieldLike | None = None) -> Vector:
        """Standard basis vector e_i of length n."""
        zeros = cls.zeros(n, field=field)
        i = check_axis_index(i, zeros.rows, 'row', zeros.shape)
        return zeros.set(i, 0, zeros.field.one)

    # === Access ===

    def __len__(self) -> int:
        return self.rows

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return super().__getitem__(key)
        return self.get(key, 0)

    def __iter__(self) -> Iterator[Any]:
        normalize = self.field.normalize_scalar
        for value in self.array[:, 0]:
            yield normalize(value)

    def with_entry(self, i: int, value: Any) -> Vector:
        """Copy with entry i replaced."""
        return self.set(i, 0, value)

    def to_list(self) -> list[Any]:
        """Flat list of the entries."""
        return self.array[:, 0].tolist()

    # === Vector Algebra ===

    def dot(self, other: Vector) -> Any:
        """
        Bilinear dot product sum(a_i * b_i) (no conjugation for complex).

        Raises:
            DimensionError: If lengths differ
        """
        other = _as_vector(other)
        if len(other) != len(self):
            raise DimensionError(
                f"dot: vector lengths {len(self)} and {len(other)} differ",
                expected=len(self),
                actual=len(other),
            )
        target = common_field(self.field, other.field)
        a = self._converted(target)[:, 0]
        b = other._converted(target)[:, 0]
        total = target.zero
        for x, y in zip(a, b):
            total = total + x * y
        return target.normalize_scalar(total)

    def norm(self) -> float:
        """Euclidean length."""
        return frobenius_norm(self)

    def normalized(self) -> Vector:
        """
        Unit vector in the same direction (inexact field).

        Raises:
            ZeroDivisionError: For the zero vector
        """
        return self.divide(self.norm())

    def cross(self, other: Vector) -> Vector:
        """
        Cross product of two 3-vectors.

        Raises:
            DimensionError: If either vector does not have length 3
        """
        other = _as_vector(other)
        if len(self) != 3 or len(other) != 3:
            raise DimensionError(
                f"cross: both vectors must have length 3, got {len(self)} and {len(other)}"
            )
        target = common_field(self.field, other.field)
        a1, a2, a3 = self._converted(target)[:, 0]
        b1, b2, b3 = other._converted(target)[:, 0]
        data = np.array(
            [[a2 * b3 - a3 * b2], [a3 * b1 - a1 * b3], [a1 * b2 - a2 * b1]],
            dtype=target.dtype,
        )
        return Vector._new(data, target)

    def __repr__(self) -> str:
        suffix = "" if self.field.name in ('exact', 'float64', 'complex128') else f", field={self.field.name!r}"
        return f"Vector.from_values({self.to_list()!r}{suffix})"


def _as_vector(value: Any) -> Vector:
    if isinstance(value, Vector):
        return value
    if isinstance(value, Matrix):
        return Vector.from_matrix(value)
    return Vector.from_values(value)

