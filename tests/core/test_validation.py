"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_integer / check_positive_dim: integral sizes, bool rejection
    - check_nonempty / check_rectangular / check_flat_length: construction input
    - check_2d: dimensionality
    - check_index / check_axis_index: bounds, negative indices rejected
    - check_same_shape / check_inner_dims / check_square / check_same_rows:
      operand compatibility
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, MatrixIndexError, ValidationError
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


# ═══════════════════════════════════════════════════════════════════════
# Sizes
# ═══════════════════════════════════════════════════════════════════════


class TestCheckInteger:

    def test_int_passthrough(self):
        assert check_integer(3, "n") == 3

    def test_numpy_int_converted(self):
        result = check_integer(np.int64(4), "n")
        assert result == 4
        assert type(result) is int

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="n"):
            check_integer(True, "n")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_integer(2.0, "n")


class TestCheckPositiveDim:

    def test_one_accepted(self):
        assert check_positive_dim(1, "rows") == 1

    def test_zero_raises(self):
        with pytest.raises(DimensionError, match="rows") as exc_info:
            check_positive_dim(0, "rows")
        assert exc_info.value.actual == 0

    def test_negative_raises(self):
        with pytest.raises(DimensionError):
            check_positive_dim(-2, "cols")


# ═══════════════════════════════════════════════════════════════════════
# Construction input
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNonempty:

    def test_nonempty_passes(self):
        check_nonempty([[1]], "rows")

    def test_empty_raises(self):
        with pytest.raises(DimensionError, match="at least one row"):
            check_nonempty([], "rows")

    def test_non_sequence_raises(self):
        with pytest.raises(DimensionError, match="sequence of rows"):
            check_nonempty(5, "rows")

    def test_string_raises(self):
        with pytest.raises(DimensionError):
            check_nonempty("ab", "rows")


class TestCheckRectangular:

    def test_returns_shape(self):
        assert check_rectangular([[1, 2, 3], [4, 5, 6]], "rows") == (2, 3)

    def test_ragged_raises(self):
        with pytest.raises(DimensionError, match="ragged") as exc_info:
            check_rectangular([[1, 2], [3]], "rows")
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_empty_row_raises(self):
        with pytest.raises(DimensionError, match="empty"):
            check_rectangular([[]], "rows")

    def test_scalar_row_raises(self):
        with pytest.raises(DimensionError, match="row 0"):
            check_rectangular([1, 2], "rows")


class TestCheckFlatLength:

    def test_matching_length_passes(self):
        check_flat_length(6, 2, 3, "data")

    def test_mismatch_raises(self):
        with pytest.raises(DimensionError, match="2x2") as exc_info:
            check_flat_length(3, 2, 2, "data")
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3


class TestCheck2D:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 2)), "data")

    def test_1d_raises(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "data")


# ═══════════════════════════════════════════════════════════════════════
# Indices
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_bounds(self):
        assert check_index(1, 2, (2, 3)) == (1, 2)

    def test_row_out_of_bounds(self):
        with pytest.raises(MatrixIndexError) as exc_info:
            check_index(2, 0, (2, 3))
        assert exc_info.value.index == (2, 0)
        assert exc_info.value.shape == (2, 3)

    def test_negative_rejected(self):
        with pytest.raises(MatrixIndexError):
            check_index(-1, 0, (2, 3))

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError):
            check_index(0.5, 0, (2, 3))


class TestCheckAxisIndex:

    def test_in_bounds(self):
        assert check_axis_index(0, 3, "row", (3, 2)) == 0

    def test_out_of_bounds(self):
        with pytest.raises(MatrixIndexError, match="column 2"):
            check_axis_index(2, 2, "column", (3, 2))


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestOperandChecks:

    def test_same_shape_passes(self):
        a = Matrix.zeros(2, 3)
        check_same_shape(a, Matrix.zeros(2, 3), "add")

    def test_same_shape_mismatch(self):
        with pytest.raises(DimensionError, match="add") as exc_info:
            check_same_shape(Matrix.zeros(2, 3), Matrix.zeros(3, 2), "add")
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)

    def test_inner_dims_mismatch(self):
        with pytest.raises(DimensionError, match="inner dimensions 3 != 4"):
            check_inner_dims(Matrix.zeros(2, 3), Matrix.zeros(4, 2), "matmul")

    def test_square_passes(self):
        check_square(Matrix.identity(3), "m", "determinant")

    def test_square_raises(self):
        with pytest.raises(DimensionError, match="must be square"):
            check_square(Matrix.zeros(2, 3), "m", "determinant")

    def test_same_rows_raises(self):
        with pytest.raises(DimensionError, match="a has 2 rows but b has 3"):
            check_same_rows(Matrix.zeros(2, 2), Matrix.zeros(3, 1), ("a", "b"), "solve")
