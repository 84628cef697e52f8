"""
Linear algebra over pymatrix matrices.

Public API:
    eliminate(m) -> EliminationResult
    determinant(m), rank(m), inverse(m), solve(a, b)
    solve_system(a, b, backend=...) -> LinearSystemSolution
    condition_estimate(m)

Example:
    >>> from pymatrix.linalg import determinant, solve
    >>> determinant([[1, 2], [3, 4]])
    -2
    >>> solve([[2, 1], [1, 3]], [3, 5]).to_list()
    [Fraction(4, 5), Fraction(7, 5)]
"""

from pymatrix.linalg._elimination import EliminationResult, eliminate
from pymatrix.linalg.design import LinearSystem
from pymatrix.linalg.solution import LinearSystemSolution, SolveParams
from pymatrix.linalg.solvers import (
    condition_estimate,
    determinant,
    inverse,
    rank,
    solve,
    solve_system,
)

__all__ = [
    "EliminationResult",
    "eliminate",
    "determinant",
    "rank",
    "inverse",
    "solve",
    "solve_system",
    "condition_estimate",
    "LinearSystem",
    "LinearSystemSolution",
    "SolveParams",
]
