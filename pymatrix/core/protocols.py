"""
Core protocols for pymatrix.

These define structural interfaces rather than base classes, so built-in
numbers, numpy scalars and Fraction satisfy them without registration.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Scalar(Protocol):
    """
    Capability set required of a matrix element.

    Additive and multiplicative identities come from the scalar field;
    the element itself must support the arithmetic below. int, float,
    complex, Fraction and numpy numeric scalars all qualify; str does not.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __eq__(self, other: Any) -> bool: ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for linear-system backends.

    Each backend takes a validated design and produces a Result with a
    parameter payload. Backends are stateless, which makes them easy to
    test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss_jordan', 'cpu_lu'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            SingularMatrixError: If the system has no unique solution
            ValidationError: If design is invalid for this backend
        """
        ...
