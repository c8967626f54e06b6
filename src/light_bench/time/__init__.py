"""Clocks, durations and wall-clock helpers."""

from .clock import (
    Clock as Clock,
)
from .clock import (
    TimePoint as TimePoint,
)
from .clock import (
    Timer as Timer,
)
from .duration import (
    Duration as Duration,
)
from .time import (
    time_iso8601 as time_iso8601,
)
from .time import (
    time_s as time_s,
)
