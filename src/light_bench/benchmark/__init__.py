"""Adaptive micro-benchmark harness and report monitors."""

from .config import (
    BenchmarkOptions as BenchmarkOptions,
)
from .harness import (
    BenchmarkHarness as BenchmarkHarness,
)
from .harness import (
    BenchmarkRun as BenchmarkRun,
)
from .harness import (
    determine_batch_size as determine_batch_size,
)
from .harness import (
    round_batch_size as round_batch_size,
)
from .harness import (
    run_benchmark as run_benchmark,
)
from .monitor import (
    DEFAULT_REPORT_TEMPLATE as DEFAULT_REPORT_TEMPLATE,
)
from .monitor import (
    REPORT_FIELDS as REPORT_FIELDS,
)
from .monitor import (
    BenchReportSource as BenchReportSource,
)
from .monitor import (
    Job as Job,
)
from .monitor import (
    Monitor as Monitor,
)
from .monitor import (
    RecordingMonitor as RecordingMonitor,
)
from .monitor import (
    StdBenchMonitor as StdBenchMonitor,
)
