"""Benchmark jobs, monitors and the standard report line."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, TextIO

from light_bench.template.channel import TemplateChannel
from light_bench.template.compiler import CompiledTemplate, compile_template
from light_bench.template.render import UNKNOWN_FIELD, format_value
from light_bench.time.duration import Duration

DEFAULT_REPORT_TEMPLATE = (
    "{{jobname : %-28s}}:  {{times: %10lu}}  | {{secs: %10.4f}} s  | {{mps: %10.2f}} MPS\n"
)

REPORT_FIELDS = (
    "jobname",
    "jobsize",
    "times",
    "secs",
    "msecs",
    "usecs",
    "nsecs",
    "gps",
    "mps",
    "kps",
    "ps",
)


class Job(ABC):
    """Optional base for benchmark jobs that carry a name and a work size.

    Any zero-argument callable can be benchmarked. Subclassing Job only adds
    the metadata the standard report shows: ``name`` and ``size``, the number
    of work items one call processes (used to scale throughput).

    Args:
        name: Label shown in reports.
        size: Work items handled per call.
    """

    def __init__(self, name: str, size: int = 1) -> None:
        if size < 1:
            raise ValueError(f"Invalid size; must be greater than 0 but got {size}")
        self.name = name
        self.size = size

    @abstractmethod
    def __call__(self) -> None:
        """Perform one repetition of the work."""


def job_name(job: Callable[[], Any]) -> str:
    name = getattr(job, "name", None)
    if isinstance(name, str):
        return name
    name = getattr(job, "__name__", None)
    if isinstance(name, str):
        return name
    return type(job).__name__


def job_size(job: Callable[[], Any]) -> int:
    size = getattr(job, "size", 1)
    return size if isinstance(size, int) and size > 0 else 1


class Monitor(Protocol):
    """Receives the outcome of one benchmark run."""

    def __call__(self, job: Callable[[], Any], n: int, elapsed: Duration) -> None: ...


class BenchReportSource:
    """Report source over one benchmark outcome.

    Throughput fields (``gps``, ``mps``, ``kps``, ``ps``) are computed over the
    run size, ``jobsize * times``.

    Args:
        job: The benchmarked callable.
        n: Total repetitions executed.
        elapsed: Total measured time.
    """

    __slots__ = ("_jobname", "_jobsize", "_times", "_runsize", "_span")

    def __init__(self, job: Callable[[], Any], n: int, elapsed: Duration) -> None:
        self._jobname = job_name(job)
        self._jobsize = job_size(job)
        self._times = n
        self._runsize = self._jobsize * n
        self._span = elapsed

    def value(self, name: str) -> Any:
        """Raw value of a report field.

        Raises:
            KeyError: If ``name`` is not a report field.
        """
        span = self._span
        match name:
            case "jobname":
                return self._jobname
            case "jobsize":
                return self._jobsize
            case "times":
                return self._times
            case "secs":
                return span.secs()
            case "msecs":
                return span.millis()
            case "usecs":
                return span.micros()
            case "nsecs":
                return span.nanos()
            case "gps":
                return span.per_sec_g(self._runsize)
            case "mps":
                return span.per_sec_m(self._runsize)
            case "kps":
                return span.per_sec_k(self._runsize)
            case "ps":
                return span.per_sec(self._runsize)
        raise KeyError(name)

    def resolve(self, name: str, format_spec: str | None = None) -> str:
        try:
            value = self.value(name)
        except KeyError:
            return UNKNOWN_FIELD
        return format_value(value, format_spec)


class StdBenchMonitor:
    """Writes one templated report line per benchmark run.

    Args:
        template: Template text or an already compiled template.
        out: Text sink for report lines. Defaults to ``sys.stdout``.
    """

    def __init__(
        self,
        template: str | CompiledTemplate = DEFAULT_REPORT_TEMPLATE,
        out: TextIO | None = None,
    ) -> None:
        if isinstance(template, str):
            template = compile_template(template)
        self._template = template
        self._channel = TemplateChannel(out if out is not None else sys.stdout)
        self._channel.write(self._template)

    @property
    def template(self) -> CompiledTemplate:
        return self._template

    @property
    def channel(self) -> TemplateChannel:
        return self._channel

    def __call__(self, job: Callable[[], Any], n: int, elapsed: Duration) -> None:
        self._channel.write(BenchReportSource(job, n, elapsed))


class RecordingMonitor:
    """Keeps every ``(job, n, elapsed)`` hand-off in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[Callable[[], Any], int, Duration]] = []

    def __call__(self, job: Callable[[], Any], n: int, elapsed: Duration) -> None:
        self.records.append((job, n, elapsed))

    def __len__(self) -> int:
        return len(self.records)

    @property
    def last(self) -> tuple[Callable[[], Any], int, Duration]:
        if not self.records:
            raise IndexError("No benchmark runs recorded")
        return self.records[-1]

    def clear(self) -> None:
        self.records.clear()
