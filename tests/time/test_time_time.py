"""Tests for wall-clock helpers."""

import re
import time as _time

import light_bench.time as lb_time
from light_bench.time import time_iso8601, time_s


class TestTime:
    """Test basic time unit functionality."""

    def test_time_function_types(self):
        assert isinstance(time_s(), float)
        assert isinstance(time_iso8601(), str)

    def test_time_s_close_to_system(self):
        assert abs(time_s() - _time.time()) < 0.1

    def test_only_used_helpers_exported(self):
        assert not hasattr(lb_time, "time_ms")
        assert not hasattr(lb_time, "time_ns")


class TestTimeISO8601:
    """Test ISO 8601 time formatting."""

    def test_iso8601_format_validation(self):
        text = time_iso8601()
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", text)

    def test_iso8601_with_custom_timestamp(self):
        # 2023-01-01 00:00:00 UTC
        assert time_iso8601(1672531200.0) == "2023-01-01T00:00:00.000Z"
        assert time_iso8601(1672531200.25) == "2023-01-01T00:00:00.250Z"
