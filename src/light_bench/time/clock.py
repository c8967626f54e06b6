"""Monotonic clock and stopwatch used for benchmark timing."""

from __future__ import annotations

import time
from types import TracebackType
from typing import Self

from light_bench.time.duration import Duration

# Integer nanosecond reading of the performance counter. Only meaningful when
# differenced against another reading taken from the same Clock.
TimePoint = int


class Clock:
    """Reads a monotonic time point and differences pairs of them.

    The counter's resolution is sampled once at construction and kept for the
    life of the instance. Build one Clock up front and hand it to whatever
    needs timing rather than creating one per measurement.
    """

    __slots__ = ("_read", "_resolution_ns", "_implementation")

    def __init__(self) -> None:
        info = time.get_clock_info("perf_counter")
        if not info.monotonic:
            raise RuntimeError("perf_counter is not monotonic on this platform")
        self._read = time.perf_counter_ns
        self._resolution_ns = info.resolution * 1.0e9
        self._implementation = info.implementation

    @property
    def resolution_ns(self) -> float:
        """Smallest tick of the underlying counter, in nanoseconds."""
        return self._resolution_ns

    @property
    def implementation(self) -> str:
        """Name of the OS facility backing the counter."""
        return self._implementation

    def now(self) -> TimePoint:
        return self._read()

    def elapsed_ns(self, start: TimePoint, end: TimePoint) -> float:
        """Nanoseconds from ``start`` to ``end``.

        ``end`` must have been sampled at or after ``start``. A misordered
        pair is clamped to zero.
        """
        d = end - start
        return float(d) if d > 0 else 0.0

    def elapsed(self, start: TimePoint, end: TimePoint) -> Duration:
        return Duration.from_nanos(self.elapsed_ns(start, end))

    def __repr__(self) -> str:
        return f"Clock(implementation={self._implementation!r}, resolution_ns={self._resolution_ns:g})"


class Timer:
    """Stopwatch over a Clock.

    Usage:
        with Timer(clock) as tm:
            work()
        print(tm.elapsed().millis())

    Inside the ``with`` block, and after ``start()`` without ``stop()``, the
    elapsed accessors read the clock afresh. Once stopped they are frozen.
    """

    def __init__(self, clock: Clock | None = None, to_start: bool = False) -> None:
        self._clock = clock if clock is not None else Clock()
        self._start_t: TimePoint | None = None
        self._stop_t: TimePoint | None = None
        if to_start:
            self.start()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def is_running(self) -> bool:
        return self._start_t is not None and self._stop_t is None

    def start(self) -> Self:
        self._stop_t = None
        self._start_t = self._clock.now()
        return self

    def stop(self) -> Duration:
        if self._start_t is None:
            raise RuntimeError("Timer was never started")
        self._stop_t = self._clock.now()
        return self.elapsed()

    def elapsed_nsecs(self) -> float:
        if self._start_t is None:
            raise RuntimeError("Timer was never started")
        end = self._stop_t if self._stop_t is not None else self._clock.now()
        return self._clock.elapsed_ns(self._start_t, end)

    def elapsed_usecs(self) -> float:
        return self.elapsed_nsecs() * 1.0e-3

    def elapsed_msecs(self) -> float:
        return self.elapsed_nsecs() * 1.0e-6

    def elapsed_secs(self) -> float:
        return self.elapsed_nsecs() * 1.0e-9

    def elapsed(self) -> Duration:
        return Duration.from_nanos(self.elapsed_nsecs())

    def __enter__(self) -> Self:
        return self.start()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
