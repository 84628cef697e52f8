"""
Input checks for matrix construction and linear algebra entry points.

Each check raises on the first problem it sees. Ragged rows, empty
shapes, booleans and non-finite floats are rejected rather than coerced.

Conventions:
    - No silent reshaping of ragged or empty input
    - Messages include the offending shape or value
    - One check per function
    - The caller's parameter name appears in every message
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any, TYPE_CHECKING

import numpy as np

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    MatrixIndexError,
)

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (bool excluded) and return it as int.

    Raises:
        ValidationError: If value is not integral
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_positive_dim(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is an integer >= 1.

    Raises:
        ValidationError: If value is not an integer
        DimensionError: If value < 1
    """
    value = check_integer(value, name)
    if value < 1:
        raise DimensionError(
            f"{name}: matrix dimensions must be >= 1, got {value}",
            expected=1,
            actual=value,
        )
    return value


def check_nonempty(rows: Any, name: str) -> None:
    """
    Verify the outer sequence of a nested-rows input has at least one row.

    Raises:
        DimensionError: If rows is empty or not a sequence
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, (Sequence, np.ndarray)):
        raise DimensionError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        )
    if len(rows) == 0:
        raise DimensionError(f"{name}: a matrix needs at least one row, got 0")


def check_rectangular(rows: Sequence[Any], name: str) -> tuple[int, int]:
    """
    Verify nested rows are sequences of equal, non-zero length.

    Returns:
        (n_rows, n_cols)

    Raises:
        DimensionError: If a row is not a sequence, is empty, or has a
            different length from the first row
    """
    n_cols: int | None = None
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise DimensionError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence of scalars"
            )
        if n_cols is None:
            n_cols = len(row)
            if n_cols == 0:
                raise DimensionError(f"{name}: row 0 is empty, a matrix needs at least one column")
        elif len(row) != n_cols:
            raise DimensionError(
                f"{name}: ragged rows, row 0 has {n_cols} elements but row {i} has {len(row)}",
                expected=n_cols,
                actual=len(row),
            )
    return len(rows), n_cols


def check_flat_length(length: int, rows: int, cols: int, name: str) -> None:
    """
    Verify a flat buffer holds exactly rows * cols elements.

    Raises:
        DimensionError: If the length does not match
    """
    if length != rows * cols:
        raise DimensionError(
            f"{name}: {length} elements cannot fill a {rows}x{cols} matrix "
            f"(expected {rows * cols})",
            expected=rows * cols,
            actual=length,
        )


def check_2d(array: np.ndarray, name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_index(i: Any, j: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify (i, j) addresses an element of a matrix with the given shape.

    Negative indices are rejected rather than wrapped.

    Raises:
        MatrixIndexError: If either index is out of range
    """
    i = check_integer(i, 'row index')
    j = check_integer(j, 'column index')
    rows, cols = shape
    if not 0 <= i < rows or not 0 <= j < cols:
        raise MatrixIndexError(
            f"index ({i}, {j}) out of bounds for {rows}x{cols} matrix",
            index=(i, j),
            shape=shape,
        )
    return i, j


def check_axis_index(value: Any, size: int, axis: str, shape: tuple[int, int]) -> int:
    """
    Verify a single row or column index lies in [0, size).

    Raises:
        MatrixIndexError: If the index is out of range
    """
    value = check_integer(value, f"{axis} index")
    if not 0 <= value < size:
        raise MatrixIndexError(
            f"{axis} {value} out of bounds for {shape[0]}x{shape[1]} matrix",
            index=(value,),
            shape=shape,
        )
    return value


def check_same_shape(a: Matrix, b: Matrix, operation: str) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"{operation}: shapes {a.rows}x{a.cols} and {b.rows}x{b.cols} differ",
            expected=a.shape,
            actual=b.shape,
        )


def check_inner_dims(a: Matrix, b: Matrix, operation: str) -> None:
    """
    Verify a.cols == b.rows for a product.

    Raises:
        DimensionError: If inner dimensions differ
    """
    if a.cols != b.rows:
        raise DimensionError(
            f"{operation}: cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols} "
            f"(inner dimensions {a.cols} != {b.rows})",
            expected=a.cols,
            actual=b.rows,
        )


def check_square(m: Matrix, name: str, operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    if m.rows != m.cols:
        raise DimensionError(
            f"{operation}: {name} must be square, got {m.rows}x{m.cols}",
            expected=(m.rows, m.rows),
            actual=m.shape,
        )


def check_same_rows(a: Matrix, b: Matrix, names: tuple[str, str], operation: str) -> None:
    """
    Verify two matrices have the same number of rows.

    Raises:
        DimensionError: If row counts differ
    """
    if a.rows != b.rows:
        raise DimensionError(
            f"{operation}: {names[0]} has {a.rows} rows but {names[1]} has {b.rows}",
            expected=a.rows,
            actual=b.rows,
        )
