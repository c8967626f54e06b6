"""Adaptive benchmark harness.

A run has four phases:

1. Warm-up: ``warming_runs`` untimed calls absorb first-call costs.
2. Probe: one timed batch of ``probe_batch_size`` calls estimates the cost
   per call.
3. Calibration: ``determine_batch_size`` scales the probe batch so one batch
   takes about ``batch_ratio * time_threshold`` seconds.
4. Measurement: calibrated batches are timed until their summed time reaches
   ``time_threshold``.

The monitor then receives the job, the total repetitions and the summed
Duration. Exceptions raised by the job propagate unchanged and no report is
produced for that run.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from itertools import repeat
from typing import Any

from msgspec import Struct

from light_bench.benchmark.config import BenchmarkOptions
from light_bench.benchmark.monitor import Monitor, job_name
from light_bench.logging.logger import Logger
from light_bench.time.clock import Clock
from light_bench.time.duration import Duration


def round_batch_size(batch: int) -> int:
    """Round down to the two leading digits, e.g. 2037 -> 2000, 12345 -> 12000."""
    scale = 1
    while batch >= 100:
        batch //= 10
        scale *= 10
    return batch * scale


def determine_batch_size(
    options: BenchmarkOptions, probe_time: float, resolution: float = 0.0
) -> int:
    """Pick the repetitions per timed batch from a probe measurement.

    Args:
        options: Benchmark options.
        probe_time: Seconds taken by ``options.probe_batch_size`` calls.
        resolution: Clock resolution in seconds. Probe times below it are
            treated as one tick.

    Returns:
        A batch size between ``probe_batch_size`` and ``max_batch_size``.
        Smaller probe times never produce smaller batches.
    """
    probe = options.probe_batch_size
    target = options.target_batch_time
    if probe_time >= target:
        return probe

    max_mult = max(options.max_batch_size // probe, 1)
    probe_time = max(probe_time, resolution)
    if probe_time <= 0.0:
        # No usable measurement and no known resolution.
        mult = max_mult
    else:
        mult = min(math.ceil(target / probe_time), max_mult)

    batch = probe * mult
    if options.round_batch_size and mult > 1 and batch > 100:
        batch = round_batch_size(batch)
    return batch


class BenchmarkRun(Struct, frozen=True):
    """Summary of one harness run, returned after the monitor is called."""

    job_name: str
    probe_time: float
    batch_size: int
    num_batches: int
    elapsed: Duration

    @property
    def repetitions(self) -> int:
        return self.batch_size * self.num_batches


class BenchmarkHarness:
    """Runs jobs under a fixed set of options, clock and optional logger.

    Args:
        options: Benchmark options. Defaults to ``BenchmarkOptions.default()``.
        clock: Clock used for every measurement. One is created if omitted.
        logger: Receives DEBUG lines describing each phase.
    """

    def __init__(
        self,
        options: BenchmarkOptions | None = None,
        clock: Clock | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._options = options if options is not None else BenchmarkOptions.default()
        self._clock = clock if clock is not None else Clock()
        self._logger = logger

    @property
    def options(self) -> BenchmarkOptions:
        return self._options

    @property
    def clock(self) -> Clock:
        return self._clock

    def time_batch(self, job: Callable[[], Any], n: int) -> float:
        """Call ``job`` ``n`` times back to back; return elapsed seconds."""
        clock = self._clock
        it = repeat(None, n)
        t0 = clock.now()
        for _ in it:
            job()
        t1 = clock.now()
        return clock.elapsed_ns(t0, t1) * 1.0e-9

    def run(self, job: Callable[[], Any], monitor: Monitor) -> BenchmarkRun:
        """Benchmark ``job`` and report the outcome to ``monitor``.

        Raises:
            InvalidOptionError: If the options are invalid. Raised before
                ``job`` is called.
        """
        options = self._options
        options.validate()
        logger = self._logger
        name = job_name(job)

        for _ in repeat(None, options.warming_runs):
            job()
        if logger is not None:
            logger.debug(f"{name}: {options.warming_runs} warm-up runs done")

        probe_time = self.time_batch(job, options.probe_batch_size)
        batch = determine_batch_size(
            options, probe_time, self._clock.resolution_ns * 1.0e-9
        )
        if logger is not None:
            logger.debug(
                f"{name}: probe of {options.probe_batch_size} took {probe_time:.6g}s; "
                f"batch size set to {batch}"
            )

        threshold = options.time_threshold
        total = 0.0
        k = 0
        while total < threshold:
            total += self.time_batch(job, batch)
            k += 1

        elapsed = Duration.from_secs(total)
        if logger is not None:
            logger.debug(f"{name}: {k} batches of {batch} in {total:.6g}s")

        monitor(job, k * batch, elapsed)
        return BenchmarkRun(
            job_name=name,
            probe_time=probe_time,
            batch_size=batch,
            num_batches=k,
            elapsed=elapsed,
        )


def run_benchmark(
    job: Callable[[], Any],
    monitor: Monitor,
    options: BenchmarkOptions | None = None,
    *,
    clock: Clock | None = None,
    logger: Logger | None = None,
) -> BenchmarkRun:
    """Benchmark ``job`` once; see ``BenchmarkHarness.run``."""
    return BenchmarkHarness(options, clock=clock, logger=logger).run(job, monitor)
