"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.result import Result


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "gauss_jordan"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss_jordan",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "gauss_jordan"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss_jordan"

    def test_timing_none(self):
        assert _result().timing is None

    def test_timing_with_breakdown(self):
        result = _result(
            timing={"total_seconds": 1.0, "elimination": 0.6, "back_substitution": 0.4},
        )
        assert result.timing["elimination"] == 0.6
        assert result.timing["back_substitution"] == 0.4


# ═══════════════════════════════════════════════════════════════════════
# Defaults and immutability
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_warnings_explicit(self):
        result = _result(warnings=("ill-conditioned", "pivot ratio tiny"))
        assert len(result.warnings) == 2


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_backend_name(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "cpu_lu"

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("Coefficient matrix is ill-conditioned: pivot ratio 1e-14",))
        assert result.has_warning("ill-conditioned") is True
        assert result.has_warning("pivot ratio") is True

    def test_no_match(self):
        result = _result(warnings=("ill-conditioned",))
        assert result.has_warning("singular") is False
