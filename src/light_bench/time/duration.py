"""Immutable elapsed-time value with unit and throughput conversions."""

from __future__ import annotations

from typing import Self


class Duration:
    """A non-negative span of time stored as (fractional) nanoseconds.

    Instances are built through the ``from_*`` constructors and never change
    afterwards. Every accessor is a pure projection of the nanosecond count.

    Throughput accessors take a repetition count ``n`` and return the rate
    at unit, kilo, mega or giga scale. A zero-length span has no defined rate
    and raises ``ZeroDivisionError``.
    """

    __slots__ = ("_ns",)

    def __init__(self, ns: float) -> None:
        ns = float(ns)
        if not ns >= 0.0:
            raise ValueError(f"Invalid duration; expected >=0 ns but got {ns}")
        self._ns = ns

    @classmethod
    def from_nanos(cls, ns: float) -> Self:
        return cls(ns)

    @classmethod
    def from_micros(cls, us: float) -> Self:
        return cls(us * 1.0e3)

    @classmethod
    def from_millis(cls, ms: float) -> Self:
        return cls(ms * 1.0e6)

    @classmethod
    def from_secs(cls, s: float) -> Self:
        return cls(s * 1.0e9)

    def secs(self) -> float:
        return self._ns * 1.0e-9

    def millis(self) -> float:
        return self._ns * 1.0e-6

    def micros(self) -> float:
        return self._ns * 1.0e-3

    def nanos(self) -> float:
        return self._ns

    def per_sec(self, n: int) -> float:
        """Operations per second for ``n`` repetitions over this span."""
        return float(n) * 1.0e9 / self._nonzero_ns()

    def per_sec_k(self, n: int) -> float:
        """Thousands of operations per second."""
        return float(n) * 1.0e6 / self._nonzero_ns()

    def per_sec_m(self, n: int) -> float:
        """Millions of operations per second."""
        return float(n) * 1.0e3 / self._nonzero_ns()

    def per_sec_g(self, n: int) -> float:
        """Billions of operations per second, i.e. operations per nanosecond."""
        return float(n) / self._nonzero_ns()

    def _nonzero_ns(self) -> float:
        if self._ns == 0.0:
            raise ZeroDivisionError("Cannot compute a rate over a zero-length duration")
        return self._ns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ns == other._ns

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ns < other._ns

    def __hash__(self) -> int:
        return hash(self._ns)

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ns + other._ns)

    def __repr__(self) -> str:
        return f"Duration(ns={self._ns:g})"
