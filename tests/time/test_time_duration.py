"""Tests for the Duration value type."""

import pytest

from light_bench.time import Duration


class TestDurationConstruction:
    """Unit constructors scale into nanoseconds."""

    def test_from_units(self):
        assert Duration.from_nanos(1500.0).nanos() == 1500.0
        assert Duration.from_micros(1.5).nanos() == pytest.approx(1500.0)
        assert Duration.from_millis(1.5).nanos() == pytest.approx(1.5e6)
        assert Duration.from_secs(1.5).nanos() == pytest.approx(1.5e9)

    def test_accessors_invert_constructors(self):
        d = Duration.from_secs(2.0)
        assert d.secs() == pytest.approx(2.0)
        assert d.millis() == pytest.approx(2.0e3)
        assert d.micros() == pytest.approx(2.0e6)
        assert d.nanos() == pytest.approx(2.0e9)

    @pytest.mark.parametrize("ns", [0.0, 0.5, 1.0, 123.456, 1e6, 987654321.0, 3.6e12])
    def test_seconds_round_trip(self, ns):
        assert Duration.from_secs(ns / 1e9).nanos() == pytest.approx(ns, rel=1e-12, abs=1e-9)

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="Invalid duration"):
            Duration.from_nanos(-1.0)

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            Duration.from_secs(float("nan"))

    def test_zero_allowed(self):
        assert Duration.from_nanos(0).nanos() == 0.0


class TestDurationThroughput:
    """Rates over a repetition count."""

    @pytest.mark.parametrize("n", [0, 1, 7, 1000, 123456789])
    def test_one_second_rate_equals_count(self, n):
        assert Duration.from_nanos(1e9).per_sec(n) == n

    def test_scaled_rates(self):
        d = Duration.from_secs(2.0)
        n = 4_000_000
        assert d.per_sec(n) == pytest.approx(2.0e6)
        assert d.per_sec_k(n) == pytest.approx(2.0e3)
        assert d.per_sec_m(n) == pytest.approx(2.0)
        assert d.per_sec_g(n) == pytest.approx(2.0e-3)

    def test_zero_duration_rate_raises(self):
        d = Duration.from_nanos(0.0)
        for rate in (d.per_sec, d.per_sec_k, d.per_sec_m, d.per_sec_g):
            with pytest.raises(ZeroDivisionError):
                rate(10)


class TestDurationValueSemantics:
    def test_equality_and_hash(self):
        assert Duration.from_millis(1.0) == Duration.from_micros(1000.0)
        assert hash(Duration.from_nanos(5.0)) == hash(Duration.from_nanos(5.0))
        assert Duration.from_nanos(1.0) != Duration.from_nanos(2.0)

    def test_ordering_and_addition(self):
        a = Duration.from_nanos(1.0)
        b = Duration.from_nanos(2.0)
        assert a < b
        assert (a + b).nanos() == 3.0

    def test_immutable(self):
        d = Duration.from_nanos(1.0)
        with pytest.raises(AttributeError):
            d.extra = 1
