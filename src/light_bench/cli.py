"""Command-line benchmark of numpy element-wise math kernels.

Usage:
    light-bench --size 1000 --time-threshold 0.5
    light-bench -k sqrt -k exp --template "{{jobname}} {{mps: %.1f}}\n"
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

import numpy as np

from light_bench.benchmark import (
    BenchmarkHarness,
    BenchmarkOptions,
    DEFAULT_REPORT_TEMPLATE,
    Job,
    StdBenchMonitor,
)
from light_bench.logging import Logger, LoggerConfig, LogLevel, StreamLogHandler
from light_bench.time import Clock

KERNELS = {
    "sqrt": np.sqrt,
    "exp": np.exp,
    "log": np.log,
    "sin": np.sin,
}


class UFuncJob(Job):
    """Applies a numpy ufunc element-wise from ``src`` into ``dst``.

    Args:
        name: Kernel name shown in reports.
        ufunc: The numpy ufunc to apply.
        src: Input array.
        dst: Output array, same shape as ``src``.
    """

    def __init__(self, name: str, ufunc: np.ufunc, src: np.ndarray, dst: np.ndarray) -> None:
        super().__init__(name, size=src.size)
        self._ufunc = ufunc
        self._src = src
        self._dst = dst

    def __call__(self) -> None:
        self._ufunc(self._src, out=self._dst)


class BenchmarkCLI:
    """Builder for benchmark command-line interfaces.

    Provides consistent CLI construction with common benchmark arguments
    pre-configured. Uses builder pattern for extensibility.

    Args:
        description: Benchmark description for --help.
    """

    def __init__(self, description: str) -> None:
        self.parser = argparse.ArgumentParser(description=description)
        self._add_common_args()

    def _add_common_args(self) -> None:
        """Add the harness options shared by every benchmark."""
        defaults = BenchmarkOptions.default()
        self.parser.add_argument(
            "--time-threshold",
            "-t",
            type=float,
            default=defaults.time_threshold,
            help=f"Seconds of measurement per job (default: {defaults.time_threshold})",
        )
        self.parser.add_argument(
            "--warmup",
            "-w",
            type=int,
            default=defaults.warming_runs,
            help=f"Number of untimed warm-up runs (default: {defaults.warming_runs})",
        )
        self.parser.add_argument(
            "--probe-batch",
            "-p",
            type=int,
            default=defaults.probe_batch_size,
            help=f"Repetitions in the timing probe (default: {defaults.probe_batch_size})",
        )
        self.parser.add_argument(
            "--template",
            default=DEFAULT_REPORT_TEMPLATE,
            help="Report line template with {{field: %%fmt}} placeholders",
        )
        self.parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Log harness calibration details to stderr",
        )

    def add_size_arg(
        self, default: int = 1000, help_text: str | None = None
    ) -> BenchmarkCLI:
        """Add --size/-s argument.

        Args:
            default: Default size value.
            help_text: Custom help text (defaults to mentioning the default).

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--size",
            "-s",
            type=int,
            default=default,
            help=help_text or f"Array length per job call (default: {default})",
        )
        return self

    def add_kernel_arg(self, choices: Sequence[str]) -> BenchmarkCLI:
        """Add a repeatable --kernel/-k argument restricted to ``choices``.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--kernel",
            "-k",
            action="append",
            choices=list(choices),
            help="Kernel to benchmark; repeat for several (default: all)",
        )
        return self

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Returns:
            Parsed arguments namespace.
        """
        return self.parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> BenchmarkOptions:
    return BenchmarkOptions(
        probe_batch_size=args.probe_batch,
        warming_runs=args.warmup,
        time_threshold=args.time_threshold,
    )


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    cli = (
        BenchmarkCLI("Benchmark numpy element-wise math kernels")
        .add_size_arg()
        .add_kernel_arg(KERNELS)
    )
    args = cli.parse(argv)
    out = out if out is not None else sys.stdout

    logger = None
    if args.verbose:
        logger = Logger(
            name="light_bench",
            config=LoggerConfig(base_level=LogLevel.DEBUG),
            handlers=[StreamLogHandler(sys.stderr)],
        )

    harness = BenchmarkHarness(options_from_args(args), clock=Clock(), logger=logger)
    # Shells pass "\\n" through literally.
    monitor = StdBenchMonitor(args.template.replace("\\n", "\n"), out)

    # Positive inputs keep log() finite.
    src = np.linspace(0.5, 1.5, args.size)
    dst = np.empty_like(src)

    out.write("benchmark results:\n")
    for name in args.kernel or KERNELS:
        harness.run(UFuncJob(name, KERNELS[name], src, dst), monitor)

    if logger is not None:
        logger.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
