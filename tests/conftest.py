"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_2x2():
    """[[1, 2], [3, 4]] over the exact field (det = -2)."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def singular_2x2():
    """Rank-1 exact matrix."""
    return Matrix.from_rows([[1, 2], [0, 0]])


@pytest.fixture
def float_square(rng):
    """Random 4x4 float64 matrix, shifted along the diagonal to stay well conditioned."""
    A = rng.standard_normal((4, 4)) + 5.0 * np.eye(4)
    return Matrix.from_array(A)


@pytest.fixture
def int_matrices(rng):
    """Three random 3x4 integer matrices for exact algebraic identities."""
    return tuple(
        Matrix.from_array(rng.integers(-9, 10, size=(3, 4)))
        for _ in range(3)
    )
