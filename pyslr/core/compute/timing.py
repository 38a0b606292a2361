"""
Wall-clock timing of backend sections.

The CPU backend wraps each stage of a fit (means, coefficients, sums of
squares) in a named section; the totals end up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Named-section stopwatch.

    start()/stop() bracket the whole fit. Each `with timer.section(name)`
    block adds its elapsed time to `name`, so a repeated section reports
    the sum of its runs.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Seconds per section plus 'total_seconds'.

        Raises:
            RuntimeError: If the timer was never stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        timings = {'total_seconds': self._total}
        timings.update(self._sections)
        return timings
