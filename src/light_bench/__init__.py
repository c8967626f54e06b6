"""Micro-benchmarking harness with compiled report templates."""

__version__ = "0.1.0"

from .benchmark import (
    DEFAULT_REPORT_TEMPLATE as DEFAULT_REPORT_TEMPLATE,
)
from .benchmark import (
    BenchmarkHarness as BenchmarkHarness,
)
from .benchmark import (
    BenchmarkOptions as BenchmarkOptions,
)
from .benchmark import (
    BenchmarkRun as BenchmarkRun,
)
from .benchmark import (
    BenchReportSource as BenchReportSource,
)
from .benchmark import (
    Job as Job,
)
from .benchmark import (
    RecordingMonitor as RecordingMonitor,
)
from .benchmark import (
    StdBenchMonitor as StdBenchMonitor,
)
from .benchmark import (
    determine_batch_size as determine_batch_size,
)
from .benchmark import (
    run_benchmark as run_benchmark,
)
from .errors import (
    CompileError as CompileError,
)
from .errors import (
    ConfigurationError as ConfigurationError,
)
from .errors import (
    FormatSpecError as FormatSpecError,
)
from .errors import (
    InvalidOptionError as InvalidOptionError,
)
from .errors import (
    LightBenchError as LightBenchError,
)
from .errors import (
    MalformedPlaceholderError as MalformedPlaceholderError,
)
from .errors import (
    UnterminatedPlaceholderError as UnterminatedPlaceholderError,
)
from .template import (
    NO_TEMPLATE as NO_TEMPLATE,
)
from .template import (
    CompiledTemplate as CompiledTemplate,
)
from .template import (
    MappingSource as MappingSource,
)
from .template import (
    TemplateChannel as TemplateChannel,
)
from .template import (
    compile_template as compile_template,
)
from .template import (
    render as render,
)
from .time import (
    Clock as Clock,
)
from .time import (
    Duration as Duration,
)
from .time import (
    Timer as Timer,
)

__all__ = [
    # Time
    "Clock",
    "Duration",
    "Timer",
    # Benchmark
    "BenchmarkHarness",
    "BenchmarkOptions",
    "BenchmarkRun",
    "BenchReportSource",
    "DEFAULT_REPORT_TEMPLATE",
    "Job",
    "RecordingMonitor",
    "StdBenchMonitor",
    "determine_batch_size",
    "run_benchmark",
    # Template
    "CompiledTemplate",
    "MappingSource",
    "NO_TEMPLATE",
    "TemplateChannel",
    "compile_template",
    "render",
    # Errors
    "LightBenchError",
    "ConfigurationError",
    "InvalidOptionError",
    "CompileError",
    "MalformedPlaceholderError",
    "UnterminatedPlaceholderError",
    "FormatSpecError",
]
