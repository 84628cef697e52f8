"""
Backends for linear system solving.

Available backends:
    cpu_gauss_jordan: Reference Gauss-Jordan elimination, any field
    cpu_lu: LAPACK LU via SciPy, inexact fields only
"""

from pymatrix.linalg.backends.cpu import CPUGaussJordanBackend, CPULUBackend

__all__ = [
    "CPUGaussJordanBackend",
    "CPULUBackend",
]
