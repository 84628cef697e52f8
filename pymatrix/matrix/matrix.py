"""
Dense matrix type.

A Matrix owns a contiguous row-major (C-order) numpy buffer of shape
(rows, cols) together with the scalar field of its elements. Element (i, j)
lives at flat offset i * cols + j.

Matrices are immutable values: the buffer is marked read-only and every
operation returns a new Matrix. Operands from different fields are promoted
along exact < real < complex before combining.

Construction:
    Matrix.from_rows([[1, 2], [3, 4]])           # exact (int) field
    Matrix.from_flat([1.0, 2.0, 3.0, 4.0], 2, 2)  # float64 field
    Matrix.zeros(2, 3)
    Matrix.identity(3, field='exact')
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from fractions import Fraction
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.fields import (
    DEFAULT_FIELD,
    COMPLEX_LEVEL,
    ScalarField,
    common_field,
    field_for_scalar,
    field_from_name,
    infer_field,
    scalar_operand_field,
)
from pymatrix.core.protocols import Scalar
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.validation import (
    check_2d,
    check_axis_index,
    check_flat_length,
    check_index,
    check_inner_dims,
    check_integer,
    check_nonempty,
    check_positive_dim,
    check_rectangular,
    check_same_rows,
    check_same_shape,
    check_square,
)
from pymatrix.matrix._format import DEFAULT_PRECISION, format_matrix

if TYPE_CHECKING:
    from pymatrix.linalg._elimination import EliminationResult
    from pymatrix.matrix.vector import Vector

FieldLike = ScalarField | str


class Matrix:
    """
    Immutable dense matrix over a scalar field.

    Construct via factory classmethods, not directly. The constructor
    trusts its array: it must be a fresh buffer already coerced to `field`.

    Invariants:
        rows >= 1, cols >= 1, buffer size == rows * cols, buffer read-only.
    """

    __slots__ = ('_data', '_field')

    # Make numpy defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, data: NDArray, field: ScalarField):
        check_2d(data, 'data')
        check_positive_dim(data.shape[0], 'rows')
        check_positive_dim(data.shape[1], 'cols')
        data = np.ascontiguousarray(data)
        data.setflags(write=False)
        self._data = data
        self._field = field

    # === Factory Methods ===

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]] | NDArray,
        *,
        field: FieldLike | None = None,
    ) -> Matrix:
        """
        Build from nested rows.

        Args:
            rows: Non-empty sequence of equal-length, non-empty rows,
                or a 2D numpy array
            field: Element field; inferred from the values when omitted

        Raises:
            DimensionError: If rows is empty or ragged
            ValidationError: If an element is not a numeric scalar
        """
        return cls._from_nested(rows, field, 'rows')

    @classmethod
    def from_flat(
        cls,
        data: Sequence[Any] | NDArray,
        rows: int,
        cols: int,
        *,
        field: FieldLike | None = None,
    ) -> Matrix:
        """
        Build from a flat row-major sequence.

        Raises:
            DimensionError: If len(data) != rows * cols or a size is < 1
        """
        rows = check_positive_dim(rows, 'rows')
        cols = check_positive_dim(cols, 'cols')
        if isinstance(data, np.ndarray):
            if data.ndim != 1:
                raise DimensionError(
                    f"data: expected a flat 1D sequence, got {data.ndim}D with shape {data.shape}"
                )
            check_flat_length(data.shape[0], rows, cols, 'data')
            return cls._build(np.array(data, copy=True).reshape(rows, cols), field, 'data')
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise DimensionError(
                f"data: expected a flat sequence, got {type(data).__name__}"
            )
        check_flat_length(len(data), rows, cols, 'data')
        buffer = np.empty(rows * cols, dtype=object)
        for k, value in enumerate(data):
            buffer[k] = value
        return cls._build(buffer.reshape(rows, cols), field, 'data')

    @classmethod
    def from_array(cls, array: Any, *, field: FieldLike | None = None) -> Matrix:
        """Build from a 2D numpy array (copied). Other inputs go through from_rows."""
        if not isinstance(array, np.ndarray):
            return cls._from_nested(array, field, 'array')
        check_2d(array, 'array')
        check_positive_dim(array.shape[0], 'rows')
        check_positive_dim(array.shape[1], 'cols')
        return cls._build(np.array(array, copy=True), field, 'array')

    @classmethod
    def zeros(cls, rows: int, cols: int, *, field: FieldLike | None = None) -> Matrix:
        """rows x cols matrix of additive identities (float64 unless `field` is given)."""
        target = _resolve_field(field)
        rows = check_positive_dim(rows, 'rows')
        cols = check_positive_dim(cols, 'cols')
        return cls(np.full((rows, cols), target.zero, dtype=target.dtype), target)

    @classmethod
    def ones(cls, rows: int, cols: int, *, field: FieldLike | None = None) -> Matrix:
        target = _resolve_field(field)
        return cls.filled(rows, cols, target.one, field=target)

    @classmethod
    def filled(
        cls,
        rows: int,
        cols: int,
        value: Any,
        *,
        field: FieldLike | None = None,
    ) -> Matrix:
        """rows x cols matrix with every element equal to `value`."""
        target = field_for_scalar(value) if field is None else field_from_name(field)
        rows = check_positive_dim(rows, 'rows')
        cols = check_positive_dim(cols, 'cols')
        value = target.coerce_scalar(value)
        data = np.empty((rows, cols), dtype=target.dtype)
        data.fill(value)
        return cls(data, target)

    @classmethod
    def identity(cls, n: int, *, field: FieldLike | None = None) -> Matrix:
        """n x n identity (float64 unless `field` is given)."""
        target = _resolve_field(field)
        n = check_positive_dim(n, 'n')
        data = np.full((n, n), target.zero, dtype=target.dtype)
        np.fill_diagonal(data, target.one)
        return cls(data, target)

    @classmethod
    def _from_nested(cls, rows: Any, field: FieldLike | None, name: str) -> Matrix:
        if isinstance(rows, np.ndarray):
            return cls.from_array(rows, field=field)
        check_nonempty(rows, name)
        n_rows, n_cols = check_rectangular(rows, name)
        data = np.empty((n_rows, n_cols), dtype=object)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                data[i, j] = value
        return cls._build(data, field, name)

    @classmethod
    def _build(cls, data: NDArray, field: FieldLike | None, name: str) -> Matrix:
        target = infer_field(data, name) if field is None else field_from_name(field)
        return cls(target.coerce(data, name), target)

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def field(self) -> ScalarField:
        return self._field

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def array(self) -> NDArray:
        """Read-only view of the row-major storage."""
        return self._data

    @property
    def T(self) -> Matrix:
        return self.transpose()

    @property
    def H(self) -> Matrix:
        """Conjugate transpose."""
        return self.conjugate().transpose()

    # === Element Access ===

    def get(self, i: int, j: int) -> Any:
        """
        Element at row i, column j.

        Raises:
            MatrixIndexError: If i >= rows, j >= cols or an index is negative
        """
        i, j = check_index(i, j, self.shape)
        return self._field.normalize_scalar(self._data[i, j])

    def set(self, i: int, j: int, value: Any) -> Matrix:
        """
        Copy of this matrix with element (i, j) replaced.

        The original is unchanged. A value from a wider field promotes
        the whole copy.

        Raises:
            MatrixIndexError: If the index is out of bounds
        """
        i, j = check_index(i, j, self.shape)
        target = scalar_operand_field(self._field, value)
        data = self._converted(target).copy()
        data[i, j] = target.coerce_scalar(value)
        return self._like(data, target)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"{type(self).__name__} indices must be (row, col) tuples, got {key!r}"
            )
        return self.get(*key)

    def row(self, i: int) -> Matrix:
        """Row i as a 1 x cols matrix."""
        i = check_axis_index(i, self.rows, 'row', self.shape)
        return Matrix(self._data[i:i + 1, :].copy(), self._field)

    def column(self, j: int) -> Vector:
        """Column j as a Vector."""
        from pymatrix.matrix.vector import Vector

        j = check_axis_index(j, self.cols, 'column', self.shape)
        return Vector(self._data[:, j:j + 1].copy(), self._field)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        """Iterate over rows as tuples of scalars."""
        normalize = self._field.normalize_scalar
        for row in self._data:
            yield tuple(normalize(value) for value in row)

    # === Conversion ===

    def to_list(self) -> list[list[Any]]:
        return self._data.tolist()

    def to_array(self) -> NDArray:
        """Writable copy of the storage."""
        return self._data.copy()

    def astype(self, field: FieldLike) -> Matrix:
        """
        Convert to another field.

        Floats convert to the exact field through their exact binary
        value; complex values never convert to real or exact.
        """
        target = field_from_name(field)
        if target == self._field:
            return self
        return self._like(target.coerce(self._data, 'matrix'), target)

    def augment(self, other: Any) -> Matrix:
        """Columns of `other` appended to the right of this matrix."""
        other = as_matrix(other, 'other')
        check_same_rows(self, other, ('matrix', 'other'), 'augment')
        target = common_field(self._field, other.field)
        return Matrix(
            np.hstack([self._converted(target), other._converted(target)]),
            target,
        )

    # === Elementwise & Algebraic Operations ===

    def add(self, other: Any) -> Matrix:
        """
        Elementwise sum.

        Raises:
            DimensionError: If shapes differ
        """
        other = as_matrix(other, 'other')
        check_same_shape(self, other, 'add')
        target = common_field(self._field, other.field)
        return self._like(self._converted(target) + other._converted(target), target)

    def sub(self, other: Any) -> Matrix:
        """
        Elementwise difference.

        Raises:
            DimensionError: If shapes differ
        """
        other = as_matrix(other, 'other')
        check_same_shape(self, other, 'sub')
        target = common_field(self._field, other.field)
        return self._like(self._converted(target) - other._converted(target), target)

    def scale(self, k: Any) -> Matrix:
        """Every element multiplied by the scalar k."""
        target = scalar_operand_field(self._field, k, 'k')
        return self._like(self._converted(target) * target.coerce_scalar(k, 'k'), target)

    def divide(self, k: Any) -> Matrix:
        """
        Every element divided by the scalar k.

        Exact matrices divide in Fraction, so the result stays exact.

        Raises:
            ZeroDivisionError: If k is zero
        """
        target = scalar_operand_field(self._field, k, 'k')
        k = target.coerce_scalar(k, 'k')
        if k == 0:
            raise ZeroDivisionError("matrix division by zero")
        if target.exact:
            k = Fraction(k)
        return self._like(self._converted(target) / k, target)

    def matmul(self, other: Any) -> Matrix:
        """
        Matrix product (standard triple sum).

        Element arithmetic follows the (promoted) field exactly; a Vector
        right operand yields a Vector.

        Raises:
            DimensionError: If self.cols != other.rows
        """
        from pymatrix.matrix.vector import Vector

        other = as_matrix(other, 'other')
        check_inner_dims(self, other, 'matmul')
        target = common_field(self._field, other.field)
        product = self._converted(target) @ other._converted(target)
        result_type = Vector if isinstance(other, Vector) else Matrix
        return result_type._new(product, target)

    def transpose(self) -> Matrix:
        return Matrix._new(self._data.T, self._field)

    def conjugate(self) -> Matrix:
        """Elementwise complex conjugate (identity for real and exact fields)."""
        if self._field.level < COMPLEX_LEVEL:
            return self
        return self._like(np.conjugate(self._data), self._field)

    def negate(self) -> Matrix:
        return self._like(-self._data, self._field)

    def trace(self) -> Any:
        """
        Sum of the diagonal.

        Raises:
            DimensionError: If not square
        """
        check_square(self, 'matrix', 'trace')
        total = self._field.zero
        for i in range(self.rows):
            total = total + self._data[i, i]
        return self._field.normalize_scalar(total)

    def power(self, n: int) -> Matrix:
        """
        Integer matrix power by repeated squaring.

        n == 0 gives the identity; negative n raises the inverse.

        Raises:
            DimensionError: If not square
            SingularMatrixError: If n < 0 and the matrix is singular
        """
        check_square(self, 'matrix', 'power')
        n = check_integer(n, 'exponent')
        base: Matrix = self
        if n < 0:
            base = self.inverse()
            n = -n
        result = Matrix.identity(self.rows, field=base.field)
        while n:
            if n & 1:
                result = result.matmul(base)
            n >>= 1
            if n:
                base = base.matmul(base)
        return result

    def minor(self, row: int, col: int) -> Matrix:
        """
        Sub-matrix with `row` and `col` removed.

        Raises:
            MatrixIndexError: If row or col is out of bounds
            DimensionError: If the matrix is smaller than 2x2
        """
        row, col = check_index(row, col, self.shape)
        if self.rows < 2 or self.cols < 2:
            raise DimensionError(
                f"minor: matrix must be at least 2x2, got {self.rows}x{self.cols}"
            )
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix._new(data, self._field)

    def cofactor(self) -> Matrix:
        """
        Cofactor matrix: C[i, j] = (-1)^(i+j) * det(minor(i, j)).

        Raises:
            DimensionError: If not square
        """
        check_square(self, 'matrix', 'cofactor')
        n = self.rows
        if n == 1:
            return Matrix.identity(1, field=self._field)
        data = np.empty((n, n), dtype=self._field.dtype)
        for i in range(n):
            for j in range(n):
                det = self.minor(i, j).determinant()
                data[i, j] = det if (i + j) % 2 == 0 else -det
        return Matrix._new(data, self._field)

    def adjugate(self) -> Matrix:
        """Transpose of the cofactor matrix."""
        return self.cofactor().transpose()

    # === Linear Algebra ===

    def echelon(self, *, atol: float | None = None) -> EliminationResult:
        from pymatrix.linalg import eliminate
        return eliminate(self, atol=atol)

    def determinant(self) -> Any:
        from pymatrix.linalg import determinant
        return determinant(self)

    def rank(self, *, atol: float | None = None) -> int:
        from pymatrix.linalg import rank
        return rank(self, atol=atol)

    def inverse(self, *, atol: float | None = None) -> Matrix:
        from pymatrix.linalg import inverse
        return inverse(self, atol=atol)

    def solve(self, b: Any, *, atol: float | None = None) -> Matrix:
        from pymatrix.linalg import solve
        return solve(self, b, atol=atol)

    # === Equality ===

    def approx_eq(self, other: Any, epsilon: float | None = None) -> bool:
        """
        Elementwise |a - b| <= epsilon with matching shapes.

        Args:
            other: Matrix (or array-like) to compare against
            epsilon: Absolute tolerance. Defaults to the tolerance tier of
                the promoted field (0 for exact fields).
        """
        other = as_matrix(other, 'other')
        if self.shape != other.shape:
            return False
        target = common_field(self._field, other.field)
        if epsilon is None:
            epsilon = select_tolerance(target).atol
        elif epsilon < 0:
            raise ValidationError(f"epsilon: must be non-negative, got {epsilon}")
        try:
            a = self._converted(target)
            b = other._converted(target)
        except ValidationError:
            return False
        if target.exact and epsilon == 0:
            return bool(np.all(a == b))
        return bool(np.all(np.abs(a - b) <= epsilon))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        target = common_field(self._field, other.field)
        try:
            a = self._converted(target)
            b = other._converted(target)
        except ValidationError:
            # An exact element too large for the other operand's float
            return False
        return bool(np.all(a == b))

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self._data.ravel().tolist())))

    # === Operators ===

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, (Matrix, np.ndarray)) or not isinstance(other, Scalar):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, (Matrix, np.ndarray)) or not isinstance(other, Scalar):
            return NotImplemented
        return self.divide(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __pos__(self) -> Matrix:
        return self

    def __pow__(self, n: int) -> Matrix:
        return self.power(n)

    # === Display ===

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Rows on separate lines, columns right-aligned."""
        return format_matrix(self, precision)

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        suffix = "" if self._field.name in _INFERRED_FIELD_NAMES else f", field={self._field.name!r}"
        return f"{type(self).__name__}.from_rows({self.to_list()!r}{suffix})"

    # === Internal ===

    @classmethod
    def _new(cls, data: NDArray, field: ScalarField) -> Matrix:
        """Wrap a computed array, normalizing it into `field` storage."""
        data = np.asarray(data, dtype=field.dtype)
        if field.exact:
            data = field.normalize(data)
        return cls(data, field)

    def _like(self, data: NDArray, field: ScalarField) -> Matrix:
        """Shape-preserving result of the same type as self."""
        return type(self)._new(data, field)

    def _converted(self, target: ScalarField) -> NDArray:
        """Storage coerced into `target` (the read-only buffer if unchanged)."""
        if target == self._field:
            return self._data
        return target.coerce(self._data, 'matrix')


_INFERRED_FIELD_NAMES = frozenset({'exact', 'float64', 'complex128'})


def _resolve_field(field: FieldLike | None) -> ScalarField:
    return DEFAULT_FIELD if field is None else field_from_name(field)


def as_matrix(value: Any, name: str = 'value') -> Matrix:
    """Matrix passthrough; nested sequences and 2D arrays are converted."""
    if isinstance(value, Matrix):
        return value
    return Matrix._from_nested(value, None, name)


def approx_eq(a: Any, b: Any, epsilon: float | None = None) -> bool:
    """Module-level form of Matrix.approx_eq."""
    return as_matrix(a, 'a').approx_eq(b, epsilon)


def frobenius_norm(m: Matrix) -> float:
    """sqrt of the sum of squared element magnitudes, as a float."""
    return math.sqrt(sum(float(abs(value)) ** 2 for value in m.array.flat))
