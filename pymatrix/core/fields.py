"""
Scalar fields for pymatrix.

A scalar field describes the element family of a matrix: how raw values are
coerced into storage, what its additive and multiplicative identities are,
and how the elimination routines decide whether a value is "zero" and which
candidate makes the best pivot.

Three families exist, ordered along the numeric tower:
    ExactField    int and Fraction (object storage, value equality)
    RealField     float64 / float32 (native storage, tolerance equality)
    ComplexField  complex128 / complex64 (native storage, modulus pivoting)

Generic algorithms never branch on the family. They call the field, which
keeps float-specific logic out of elimination.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import math
import numbers
from dataclasses import dataclass, field as dataclass_field
from fractions import Fraction
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError

EXACT_LEVEL = 0
REAL_LEVEL = 1
COMPLEX_LEVEL = 2


class ScalarField(ABC):
    """
    Base class for element families.

    Subclasses provide storage coercion, identities and the
    "is this the additive identity" test used by elimination.
    """

    exact: bool = False
    level: int = EXACT_LEVEL

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        ...

    @property
    @abstractmethod
    def zero(self) -> Any:
        ...

    @property
    @abstractmethod
    def one(self) -> Any:
        ...

    @property
    @abstractmethod
    def epsilon(self) -> float:
        """Machine epsilon of the storage type (0.0 for exact fields)."""
        ...

    @abstractmethod
    def coerce(self, array: NDArray, name: str = 'data') -> NDArray:
        """Convert a 2D array into this field's storage representation."""
        ...

    @abstractmethod
    def coerce_scalar(self, value: Any, name: str = 'value') -> Any:
        """Convert a single value into this field's element type."""
        ...

    @abstractmethod
    def working(self, array: NDArray) -> NDArray:
        """Writable copy of `array` suitable for in-place elimination."""
        ...

    def normalize(self, array: NDArray) -> NDArray:
        """Map a working array back to the storage representation."""
        return array

    def normalize_scalar(self, value: Any) -> Any:
        """Map a working scalar back to a plain Python scalar."""
        return value.item() if isinstance(value, np.generic) else value

    def pivot_index(self, column: NDArray) -> int:
        """Index of the largest-magnitude entry (first one on ties)."""
        return int(np.argmax(np.abs(column)))

    def is_zero(self, value: Any, tol: float) -> bool:
        """True if `value` is the additive identity, within `tol`."""
        return bool(abs(value) <= tol)

    def tolerance_for(self, array: NDArray) -> float:
        """
        Default zero threshold for eliminating `array`.

        max(rows, cols) * eps * max|a|, the rank threshold numpy uses
        in matrix_rank. Exact fields always return 0.0.
        """
        if array.size == 0:
            return 0.0
        max_abs = float(np.max(np.abs(array)))
        return max(array.shape) * self.epsilon * max_abs

    @abstractmethod
    def format_element(self, value: Any, precision: int) -> str:
        ...

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ExactField(ScalarField):
    """
    Integers and rationals.

    Stored as Python int / Fraction objects so arithmetic never overflows
    or rounds. Division during elimination is done in Fraction; results
    with denominator 1 are normalized back to int.
    """

    exact = True
    level = EXACT_LEVEL

    @property
    def name(self) -> str:
        return 'exact'

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(object)

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def epsilon(self) -> float:
        return 0.0

    def coerce(self, array: NDArray, name: str = 'data') -> NDArray:
        if array.dtype.kind == 'c':
            raise ValidationError(
                f"{name}: complex elements cannot be represented in the exact field"
            )
        out = np.empty(array.shape, dtype=object)
        for idx, value in np.ndenumerate(array):
            out[idx] = _to_exact(value, name)
        return out

    def coerce_scalar(self, value: Any, name: str = 'value') -> Any:
        return _to_exact(value, name)

    def working(self, array: NDArray) -> NDArray:
        out = np.empty(array.shape, dtype=object)
        for idx, value in np.ndenumerate(array):
            out[idx] = Fraction(value)
        return out

    def normalize(self, array: NDArray) -> NDArray:
        out = np.empty(array.shape, dtype=object)
        for idx, value in np.ndenumerate(array):
            out[idx] = self.normalize_scalar(value)
        return out

    def normalize_scalar(self, value: Any) -> Any:
        if isinstance(value, Fraction) and value.denominator == 1:
            return value.numerator
        return value

    def pivot_index(self, column: NDArray) -> int:
        return max(range(len(column)), key=lambda i: abs(column[i]))

    def is_zero(self, value: Any, tol: float) -> bool:
        return value == 0

    def tolerance_for(self, array: NDArray) -> float:
        return 0.0

    def format_element(self, value: Any, precision: int) -> str:
        return str(value)


@dataclass(frozen=True)
class RealField(ScalarField):
    """Real floating point, float64 unless float32 was requested."""

    dtype_: np.dtype = dataclass_field(default=np.dtype(np.float64))

    exact = False
    level = REAL_LEVEL

    @property
    def name(self) -> str:
        return self.dtype_.name

    @property
    def dtype(self) -> np.dtype:
        return self.dtype_

    @property
    def zero(self) -> np.floating:
        return self.dtype_.type(0)

    @property
    def one(self) -> np.floating:
        return self.dtype_.type(1)

    @property
    def epsilon(self) -> float:
        return float(np.finfo(self.dtype_).eps)

    def coerce(self, array: NDArray, name: str = 'data') -> NDArray:
        if array.dtype.kind == 'c':
            raise ValidationError(
                f"{name}: complex elements cannot be stored in a {self.name} matrix"
            )
        if array.dtype == object:
            for value in array.flat:
                _check_level(value, REAL_LEVEL, name)
        result = _to_inexact_array(array, self.dtype_, name)
        _check_finite(result, name)
        return result

    def coerce_scalar(self, value: Any, name: str = 'value') -> np.floating:
        _check_level(value, REAL_LEVEL, name)
        return _to_inexact_scalar(value, self.dtype_, name)

    def working(self, array: NDArray) -> NDArray:
        return np.array(array, dtype=self.dtype_, copy=True)

    def format_element(self, value: Any, precision: int) -> str:
        return f"{float(value):.{precision}g}"


@dataclass(frozen=True)
class ComplexField(ScalarField):
    """Complex floating point, complex128 unless complex64 was requested."""

    dtype_: np.dtype = dataclass_field(default=np.dtype(np.complex128))

    exact = False
    level = COMPLEX_LEVEL

    @property
    def name(self) -> str:
        return self.dtype_.name

    @property
    def dtype(self) -> np.dtype:
        return self.dtype_

    @property
    def zero(self) -> np.complexfloating:
        return self.dtype_.type(0)

    @property
    def one(self) -> np.complexfloating:
        return self.dtype_.type(1)

    @property
    def epsilon(self) -> float:
        return float(np.finfo(self.dtype_).eps)

    def coerce(self, array: NDArray, name: str = 'data') -> NDArray:
        if array.dtype == object:
            for value in array.flat:
                _check_level(value, COMPLEX_LEVEL, name)
        result = _to_inexact_array(array, self.dtype_, name)
        _check_finite(result, name)
        return result

    def coerce_scalar(self, value: Any, name: str = 'value') -> np.complexfloating:
        _check_level(value, COMPLEX_LEVEL, name)
        return _to_inexact_scalar(value, self.dtype_, name)

    def working(self, array: NDArray) -> NDArray:
        return np.array(array, dtype=self.dtype_, copy=True)

    def format_element(self, value: Any, precision: int) -> str:
        value = complex(value)
        return f"{value.real:.{precision}g}{value.imag:+.{precision}g}j"


EXACT = ExactField()
FLOAT64 = RealField(np.dtype(np.float64))
FLOAT32 = RealField(np.dtype(np.float32))
COMPLEX128 = ComplexField(np.dtype(np.complex128))
COMPLEX64 = ComplexField(np.dtype(np.complex64))

_FIELDS_BY_NAME: dict[str, ScalarField] = {
    'exact': EXACT,
    'float64': FLOAT64,
    'float32': FLOAT32,
    'complex128': COMPLEX128,
    'complex64': COMPLEX64,
}

DEFAULT_FIELD = FLOAT64


def field_from_name(name: str | ScalarField) -> ScalarField:
    """
    Look up a field by name ('exact', 'float64', 'float32',
    'complex128', 'complex64'). Field instances pass through.
    """
    if isinstance(name, ScalarField):
        return name
    try:
        return _FIELDS_BY_NAME[name]
    except KeyError:
        raise ValueError(
            f"Unknown field: {name!r}. Available: {sorted(_FIELDS_BY_NAME)}"
        ) from None


def field_for_dtype(dtype: np.dtype) -> ScalarField:
    """Field that natively stores a numeric numpy dtype."""
    dtype = np.dtype(dtype)
    kind = dtype.kind
    if kind in 'iu':
        return EXACT
    if kind == 'f':
        return FLOAT32 if dtype == np.float32 else FLOAT64
    if kind == 'c':
        return COMPLEX64 if dtype == np.complex64 else COMPLEX128
    raise ValidationError(f"non-numeric dtype {dtype}, expected numeric data")


def infer_field(array: NDArray, name: str = 'data') -> ScalarField:
    """
    Infer the narrowest field able to hold every element of `array`.

    Numeric dtypes map directly; object arrays are scanned element by
    element along the tower int/Fraction < real < complex.

    Raises:
        ValidationError: On booleans or non-numeric elements
    """
    if array.dtype.kind == 'b':
        raise ValidationError(f"{name}: boolean elements are not numeric scalars")
    if array.dtype != object:
        try:
            return field_for_dtype(array.dtype)
        except ValidationError as e:
            raise ValidationError(f"{name}: {e}") from e

    level = EXACT_LEVEL
    for value in array.flat:
        level = max(level, _element_level(value, name))
    return _field_for_level(level)


def field_for_scalar(value: Any, name: str = 'value') -> ScalarField:
    """Field of a single scalar operand (numpy scalars keep their dtype)."""
    if isinstance(value, np.generic) and value.dtype.kind in 'fc':
        return field_for_dtype(value.dtype)
    return _field_for_level(_element_level(value, name))


def common_field(a: ScalarField, b: ScalarField) -> ScalarField:
    """
    Field both operands promote to.

    Moves up the tower exact < real < complex; between two inexact fields
    the dtype is numpy's result type (float32 + complex128 -> complex128).
    """
    if a == b:
        return a
    if a.exact:
        return b
    if b.exact:
        return a
    return field_for_dtype(np.result_type(a.dtype, b.dtype))


def scalar_operand_field(
    field: ScalarField, value: Any, name: str = 'value'
) -> ScalarField:
    """
    Field of a matrix in `field` combined with the scalar `value`.

    numpy scalars are strong operands and promote through common_field.
    Builtin int, Fraction, float and complex are weak: they keep the
    matrix field when it already reaches their level, so a float32 matrix
    scaled by 2.0 stays float32. A weak complex scalar lifts a real field
    to the complex field of matching precision.

    Example:
        >>> scalar_operand_field(FLOAT32, 2.0) is FLOAT32
        True
        >>> scalar_operand_field(FLOAT32, 1j) is COMPLEX64
        True
    """
    if isinstance(value, np.generic):
        return common_field(field, field_for_scalar(value, name))
    level = _element_level(value, name)
    if level <= field.level:
        return field
    if field.exact:
        return _field_for_level(level)
    return field_for_dtype(np.result_type(field.dtype, np.complex64))


def _field_for_level(level: int) -> ScalarField:
    if level == EXACT_LEVEL:
        return EXACT
    if level == REAL_LEVEL:
        return FLOAT64
    return COMPLEX128


def _element_level(value: Any, name: str) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: boolean elements are not numeric scalars")
    if isinstance(value, (numbers.Integral, numbers.Rational)):
        return EXACT_LEVEL
    if isinstance(value, numbers.Real):
        return REAL_LEVEL
    if isinstance(value, numbers.Complex):
        return COMPLEX_LEVEL
    raise ValidationError(
        f"{name}: non-numeric element {value!r} of type {type(value).__name__}"
    )


def _check_level(value: Any, max_level: int, name: str) -> None:
    level = _element_level(value, name)
    if level > max_level:
        raise ValidationError(
            f"{name}: element {value!r} does not fit a "
            f"{'real' if max_level == REAL_LEVEL else 'exact'} field"
        )


def _check_finite(array: NDArray, name: str) -> None:
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def _to_exact(value: Any, name: str) -> int | Fraction:
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: boolean elements are not numeric scalars")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Fraction):
        return value.numerator if value.denominator == 1 else value
    if isinstance(value, numbers.Rational):
        return _to_exact(Fraction(value.numerator, value.denominator), name)
    if isinstance(value, numbers.Real):
        f = float(value)
        if not math.isfinite(f):
            raise ValidationError(f"{name}: non-finite value {f} has no exact form")
        return _to_exact(Fraction(f), name)
    raise ValidationError(
        f"{name}: element {value!r} cannot be represented in the exact field"
    )


def _to_inexact_array(array: NDArray, dtype: np.dtype, name: str) -> NDArray:
    try:
        return np.asarray(array, dtype=dtype)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: element too large for a {dtype.name} matrix"
        ) from e


def _to_inexact_scalar(value: Any, dtype: np.dtype, name: str) -> np.inexact:
    try:
        with np.errstate(over='ignore'):
            result = dtype.type(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {value!r} is too large for a {dtype.name} element"
        ) from e
    if not np.isfinite(result):
        raise ValidationError(f"{name}: non-finite value {value!r}")
    return result
