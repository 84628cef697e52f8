"""
Shared compute infrastructure for pymatrix.

Numeric support shared by the matrix type and the linear-algebra
routines. Nothing here knows about Matrix itself.

Submodules:
    tolerances: Tolerance tiers per scalar field
    timing: Execution timing utilities
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT_ARITHMETIC,
    FP64,
    FP32,
    ILL_CONDITIONED_PIVOT_RATIO,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT_ARITHMETIC",
    "FP64",
    "FP32",
    "ILL_CONDITIONED_PIVOT_RATIO",
    "select_tolerance",
]
