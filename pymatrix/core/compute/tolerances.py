"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each scalar field:
- Exact (int / Fraction): no tolerance, equality is value equality
- FP64: double precision
- FP32: relaxed for single-precision arithmetic

Used by approx_eq defaults, the test suite, and the ill-conditioning
check of the Gauss-Jordan backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pymatrix.core.fields import ScalarField


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT_ARITHMETIC = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer / rational arithmetic, compared by value equality',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='fp64',
    description='Double precision (float64 / complex128)',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-4,
    name='fp32',
    description='Single precision (float32 / complex64)',
)

# Smallest/largest pivot magnitude ratio below which a solved system is
# reported as ill-conditioned.
ILL_CONDITIONED_PIVOT_RATIO = 1e-12


def select_tolerance(field: ScalarField) -> ToleranceTier:
    """Select the tolerance tier for a scalar field."""
    if field.exact:
        return EXACT_ARITHMETIC
    if np.finfo(field.dtype).bits <= 32:
        return FP32
    return FP64
