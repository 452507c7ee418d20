"""
Wall-clock timing for invert().

A Timer measures one total span plus any number of named sections; the
result dict becomes Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total and per-section wall-clock timer.

    invert() uses it as:

        timer = Timer()
        timer.start()
        with timer.section('elimination'):
            gj = gauss_jordan_inverse(A)
        with timer.section('condition'):
            cond = condition_number(A)
        timer.stop()
        timer.result()
        # {'total_seconds': ..., 'elimination': ..., 'condition': ...}

    Re-entering a section adds to its previous time.
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
        """Time the enclosed block under `name`, even if it raises."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Timing dict with 'total_seconds' first, then each section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
