"""
Wall-clock timing for solver backends.

A backend opens one Timer per solve, wraps each phase (elimination,
factorization, back substitution) in a named section and hands the
resulting breakdown to its Result.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Collects the elapsed time of named solver phases.

    Example:
        >>> timer = Timer()
        >>> timer.start()
        >>> with timer.section('elimination'):
        ...     pass
        >>> timer.stop()
        >>> sorted(timer.result())
        ['elimination', 'total_seconds']
    """

    def __init__(self) -> None:
        self._sections: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Measure one phase. A phase entered twice adds to its earlier time.
        """
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - t0
            )

    def result(self) -> dict[str, float]:
        """
        Timing breakdown: 'total_seconds' plus one key per phase.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a whole block with a started Timer that stops on exit.

    Example:
        >>> with timed() as timer:
        ...     _ = sum(range(10))
        >>> timer.result()['total_seconds'] >= 0.0
        True
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
