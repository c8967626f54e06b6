from collections.abc import Callable

import pytest

from light_bench.benchmark import Job
from light_bench.time import Clock


class FakeClock(Clock):
    """Clock whose time only moves when ``advance`` is called."""

    def __init__(self, start_ns: int = 0, resolution_ns: float | None = None) -> None:
        super().__init__()
        self.t = start_ns
        if resolution_ns is not None:
            self._resolution_ns = resolution_ns

    def now(self) -> int:
        return self.t

    def advance(self, ns: int) -> None:
        self.t += ns


class CostlyJob(Job):
    """Job that advances a FakeClock by a fixed cost per call and counts calls."""

    def __init__(self, clock: FakeClock, cost_ns: int, name: str = "costly", size: int = 1) -> None:
        super().__init__(name, size)
        self.clock = clock
        self.cost_ns = cost_ns
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
        self.clock.advance(self.cost_ns)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Return a fresh deterministic clock starting at zero."""
    return FakeClock()


@pytest.fixture
def costly_job(fake_clock: FakeClock) -> Callable[..., CostlyJob]:
    """Return a factory for jobs costing a fixed number of fake nanoseconds."""

    def _make(cost_ns: int, name: str = "costly", size: int = 1) -> CostlyJob:
        return CostlyJob(fake_clock, cost_ns, name=name, size=size)

    return _make


@pytest.fixture
def coarse_clock() -> FakeClock:
    """Return a deterministic clock that ticks in whole microseconds."""
    return FakeClock(resolution_ns=1_000.0)
