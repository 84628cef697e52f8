"""
Tests for the Vector column type.

Validates:
    - Construction (from_values, from_matrix, zeros, ones, basis)
    - Single-column invariant
    - Indexing / iteration / flat to_list
    - Shape-preserving operations keep the Vector type
    - dot, norm, normalized, cross
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Matrix, Vector
from pymatrix.core.exceptions import DimensionError, MatrixIndexError
from pymatrix.core.fields import EXACT, FLOAT32, FLOAT64


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestVectorConstruction:

    def test_from_values(self):
        v = Vector.from_values([1, 2, 3])
        assert v.shape == (3, 1)
        assert v.field is EXACT
        assert len(v) == 3

    def test_from_numpy_1d(self):
        v = Vector.from_values(np.array([1.0, 2.0]))
        assert v.field is FLOAT64
        assert v.to_list() == [1.0, 2.0]

    def test_from_numpy_column(self):
        v = Vector.from_values(np.array([[1.0], [2.0]]))
        assert v.shape == (2, 1)

    def test_empty_raises(self):
        with pytest.raises(DimensionError, match="at least one element"):
            Vector.from_values([])

    def test_2d_numpy_raises(self):
        with pytest.raises(DimensionError):
            Vector.from_values(np.ones((2, 2)))

    def test_from_matrix(self):
        v = Vector.from_matrix(Matrix.from_rows([[1], [2]]))
        assert isinstance(v, Vector)
        assert v.to_list() == [1, 2]

    def test_from_wide_matrix_raises(self, exact_2x2):
        with pytest.raises(DimensionError, match="exactly one column"):
            Vector.from_matrix(exact_2x2)

    def test_zeros(self):
        v = Vector.zeros(3)
        assert isinstance(v, Vector)
        assert v.to_list() == [0.0, 0.0, 0.0]

    def test_ones_exact(self):
        v = Vector.ones(2, field='exact')
        assert isinstance(v, Vector)
        assert v.to_list() == [1, 1]

    def test_basis(self):
        assert Vector.basis(3, 1).to_list() == [0.0, 1.0, 0.0]

    def test_basis_out_of_range(self):
        with pytest.raises(MatrixIndexError):
            Vector.basis(3, 3)


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestVectorAccess:

    def test_integer_indexing(self):
        v = Vector.from_values([4, 5, 6])
        assert v[1] == 5
        assert v[2, 0] == 6

    def test_index_out_of_range(self):
        with pytest.raises(MatrixIndexError):
            Vector.from_values([1, 2])[2]

    def test_iteration_yields_scalars(self):
        assert list(Vector.from_values([1, Fraction(1, 2)])) == [1, Fraction(1, 2)]

    def test_with_entry(self):
        v = Vector.from_values([1, 2, 3])
        updated = v.with_entry(0, 9)
        assert isinstance(updated, Vector)
        assert updated.to_list() == [9, 2, 3]
        assert v.to_list() == [1, 2, 3]

    def test_matrix_column(self, exact_2x2):
        assert exact_2x2.column(1) == Vector.from_values([2, 4])


# ═══════════════════════════════════════════════════════════════════════
# Operations
# ═══════════════════════════════════════════════════════════════════════


class TestVectorOperations:

    def test_add_keeps_type(self):
        v = Vector.from_values([1, 2])
        assert isinstance(v + v, Vector)
        assert (v + v).to_list() == [2, 4]

    def test_scale_keeps_type(self):
        assert isinstance(3 * Vector.from_values([1, 2]), Vector)

    def test_negate_keeps_type(self):
        assert isinstance(-Vector.from_values([1, 2]), Vector)

    def test_dot(self):
        a = Vector.from_values([1, 2, 3])
        b = Vector.from_values([4, 5, 6])
        assert a.dot(b) == 32
        assert type(a.dot(b)) is int

    def test_dot_accepts_sequence(self):
        assert Vector.from_values([1, 2]).dot([3, 4]) == 11

    def test_dot_length_mismatch(self):
        with pytest.raises(DimensionError, match="dot"):
            Vector.from_values([1, 2]).dot(Vector.from_values([1, 2, 3]))

    def test_dot_complex_is_bilinear(self):
        v = Vector.from_values([1j])
        assert v.dot(v) == -1

    def test_norm(self):
        assert Vector.from_values([3, 4]).norm() == pytest.approx(5.0)

    def test_normalized(self):
        unit = Vector.from_values([3.0, 4.0]).normalized()
        assert isinstance(unit, Vector)
        np.testing.assert_allclose(unit.to_list(), [0.6, 0.8])
        assert unit.norm() == pytest.approx(1.0)

    def test_normalized_keeps_float32(self):
        unit = Vector.from_values([3, 4], field='float32').normalized()
        assert unit.field is FLOAT32
        np.testing.assert_allclose(unit.to_list(), [0.6, 0.8], rtol=1e-6)

    def test_normalized_zero_vector(self):
        with pytest.raises(ZeroDivisionError):
            Vector.zeros(3).normalized()

    def test_cross(self):
        e1 = Vector.from_values([1, 0, 0])
        e2 = Vector.from_values([0, 1, 0])
        assert e1.cross(e2) == Vector.from_values([0, 0, 1])
        assert e2.cross(e1) == Vector.from_values([0, 0, -1])

    def test_cross_orthogonal(self, rng):
        a = Vector.from_values(rng.standard_normal(3))
        b = Vector.from_values(rng.standard_normal(3))
        c = a.cross(b)
        assert abs(c.dot(a)) < 1e-12
        assert abs(c.dot(b)) < 1e-12

    def test_cross_wrong_length(self):
        with pytest.raises(DimensionError, match="length 3"):
            Vector.from_values([1, 2]).cross([3, 4])

    def test_repr(self):
        assert repr(Vector.from_values([1, 2, 3])) == "Vector.from_values([1, 2, 3])"

    def test_repr_float32(self):
        v = Vector.ones(1, field='float32')
        assert repr(v) == "Vector.from_values([1.0], field='float32')"
