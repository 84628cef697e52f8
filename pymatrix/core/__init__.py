"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the matrix
types and the linear-algebra routines.

Key components:
    protocols: Scalar, Backend protocols
    fields: Scalar field families (exact, real, complex)
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances and timing
"""

from pymatrix.core.protocols import Scalar, Backend
from pymatrix.core.result import Result
from pymatrix.core.fields import (
    ScalarField,
    ExactField,
    RealField,
    ComplexField,
    EXACT,
    FLOAT64,
    FLOAT32,
    COMPLEX128,
    COMPLEX64,
    common_field,
    field_from_name,
    infer_field,
)
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Scalar",
    "Backend",
    # Result
    "Result",
    # Fields
    "ScalarField",
    "ExactField",
    "RealField",
    "ComplexField",
    "EXACT",
    "FLOAT64",
    "FLOAT32",
    "COMPLEX128",
    "COMPLEX64",
    "common_field",
    "field_from_name",
    "infer_field",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MatrixIndexError",
    "NumericalError",
    "SingularMatrixError",
]
