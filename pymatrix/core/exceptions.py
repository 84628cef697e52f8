"""
Exception hierarchy for pymatrix.

Every error the library raises derives from PyMatrixError. Shape and
element problems are ValidationErrors; failures found while eliminating
(singular or rank-deficient input) are NumericalErrors.

Conventions:
    - Diagnostics (matrix name, rank, expected rank) ride along as attributes
    - Messages state the offending value next to what was required
    - Callers re-raise with at least as much context as they caught
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric elements, booleans, non-finite floats).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a constructor receives ragged or empty data, or when the
    operand shapes of an operation are incompatible.

    Attributes:
        expected: Expected shape or size, if meaningful
        actual: Shape or size that was received, if meaningful
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class MatrixIndexError(ValidationError, IndexError):
    """
    Element access outside the matrix bounds.

    Also an IndexError, so plain ``except IndexError`` handlers catch it.

    Attributes:
        index: The offending (row, col) index
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically rank-deficient.

    Raised when an operation requires invertibility (inverse, solve) but
    elimination found fewer pivots than rows.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Rank found by elimination, if computed
        expected_rank: Rank required for invertibility (the dimension)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
