"""
Tests for the pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - MatrixIndexError is also a builtin IndexError
    - Diagnostic attributes on DimensionError, MatrixIndexError,
      SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    NumericalError,
    PyMatrixError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise MatrixIndexError("out of bounds")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise MatrixIndexError("out of bounds")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_attributes(self):
        err = DimensionError("add: shapes differ", expected=(2, 3), actual=(3, 2))
        assert str(err) == "add: shapes differ"
        assert err.expected == (2, 3)
        assert err.actual == (3, 2)

    def test_defaults_are_none(self):
        err = DimensionError("ragged")
        assert err.expected is None
        assert err.actual is None


class TestMatrixIndexError:

    def test_attributes(self):
        err = MatrixIndexError("index (2, 0) out of bounds", index=(2, 0), shape=(2, 2))
        assert err.index == (2, 0)
        assert err.shape == (2, 2)

    def test_defaults_are_none(self):
        err = MatrixIndexError("bad index")
        assert err.index is None
        assert err.shape is None


class TestSingularMatrixError:
    """SingularMatrixError carries rank diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "Matrix is singular",
            matrix_name="m",
            rank=1,
            expected_rank=2,
        )
        assert str(err) == "Matrix is singular"
        assert err.matrix_name == "m"
        assert err.rank == 1
        assert err.expected_rank == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="a", rank=0)
        assert exc_info.value.matrix_name == "a"
        assert exc_info.value.rank == 0
