"""
CPU backends for square linear systems.

CPUGaussJordanBackend is the reference implementation: Gauss-Jordan on the
augmented matrix through the shared elimination primitive, valid for every
field (exact results for int / Fraction systems).

CPULUBackend hands inexact systems to LAPACK (getrf/getrs via
scipy.linalg.lu_factor / lu_solve).
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.core.result import Result
from pymatrix.linalg._elimination import back_substitute, reduce_augmented
from pymatrix.linalg.design import LinearSystem
from pymatrix.linalg.solution import SolveParams


class CPUGaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination with partial pivoting.

    Implements the Backend protocol for LinearSystem -> SolveParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: LinearSystem) -> Result[SolveParams]:
        """
        Solve a · x = b.

        Algorithm:
            1. Forward elimination of [a | b] with partial pivoting
            2. Rank check (rank < n -> singular)
            3. Jordan back substitution; the right block is x

        Raises:
            SingularMatrixError: If a is rank-deficient
        """
        timer = Timer()
        timer.start()
        field = design.field

        with timer.section('elimination'):
            reduction = reduce_augmented(design.a.array, design.b.array, field)

        if reduction.rank < design.n:
            raise _singular(reduction.rank, design.n)

        with timer.section('back_substitution'):
            x = back_substitute(reduction, field)

        timer.stop()

        pivot_ratio = None if field.exact else reduction.pivot_ratio
        params = SolveParams(
            solution=design.wrap_solution(x),
            rank=reduction.rank,
            pivot_sign=reduction.pivot_sign,
            pivot_ratio=pivot_ratio,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'rank': reduction.rank,
            'pivot_sign': reduction.pivot_sign,
            'tolerance': reduction.tolerance,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_conditioning_warnings(pivot_ratio),
        )


class CPULUBackend:
    """
    CPU backend using LAPACK LU factorization.

    Implements the Backend protocol for LinearSystem -> SolveParams.
    Inexact (real / complex) fields only.
    """

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, design: LinearSystem) -> Result[SolveParams]:
        """
        Solve a · x = b via P A = L U.

        Raises:
            ValidationError: If the system is over the exact field
            SingularMatrixError: If U has a (numerically) zero diagonal entry
        """
        from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

        field = design.field
        if field.exact:
            raise ValidationError(
                "cpu_lu backend requires an inexact field (float or complex); "
                "use backend='gauss' for exact systems"
            )

        timer = Timer()
        timer.start()
        A = design.a.to_array()
        B = design.b.to_array()
        n = design.n

        with timer.section('lu_factor'):
            with warnings.catch_warnings():
                # Singular input is reported below as SingularMatrixError
                warnings.simplefilter('ignore', LinAlgWarning)
                lu, piv = lu_factor(A)

        diag = np.abs(np.diag(lu))
        rank = int(np.sum(diag > field.tolerance_for(A)))
        if rank < n:
            raise _singular(rank, n)

        with timer.section('lu_solve'):
            x = lu_solve((lu, piv), B)

        timer.stop()

        swaps = int(np.sum(piv != np.arange(n)))
        pivot_sign = -1 if swaps % 2 else 1
        pivot_ratio = float(diag.min() / diag.max())

        params = SolveParams(
            solution=design.wrap_solution(x),
            rank=n,
            pivot_sign=pivot_sign,
            pivot_ratio=pivot_ratio,
        )

        info: dict[str, Any] = {
            'method': 'lu',
            'rank': n,
            'pivot_sign': pivot_sign,
            'pivot': piv.tolist(),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_conditioning_warnings(pivot_ratio),
        )


def _singular(rank: int, n: int) -> SingularMatrixError:
    return SingularMatrixError(
        f"Coefficient matrix is singular: rank={rank}, expected={n}. "
        f"The system has no unique solution.",
        matrix_name='a',
        rank=rank,
        expected_rank=n,
    )


def _conditioning_warnings(pivot_ratio: float | None) -> tuple[str, ...]:
    if pivot_ratio is None or pivot_ratio >= ILL_CONDITIONED_PIVOT_RATIO:
        return ()
    message = (
        f"Coefficient matrix is ill-conditioned: pivot ratio {pivot_ratio:.3g} "
        f"is below {ILL_CONDITIONED_PIVOT_RATIO:g}; the solution may be inaccurate."
    )
    warnings.warn(message, RuntimeWarning, stacklevel=4)
    return (message,)
