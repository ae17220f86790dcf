"""Scoped wall-clock timer for CLI commands."""

import logging
import time

logger = logging.getLogger(__name__)


class Timer:
    """
    Context manager measuring wall-clock time with time.perf_counter.

    Example:
        >>> with Timer("batch") as t:
        ...     run_batch()
        >>> t.elapsed_ms
    """

    def __init__(self, name: str):
        self.name = name
        self._start: float | None = None
        self._end: float | None = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()
        logger.info("%s: %.3f ms", self.name, self.elapsed_ms)

    @property
    def elapsed_ms(self) -> float:
        """Elapsed milliseconds (running total while inside the block)."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return (end - self._start) * 1000.0
