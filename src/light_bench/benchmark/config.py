"""Benchmark harness configuration."""

from typing import Self

from msgspec import Struct
from msgspec.structs import asdict

from light_bench.errors import InvalidOptionError


class BenchmarkOptions(Struct, frozen=True, kw_only=True):
    """Knobs for a single benchmark run.

    Args:
        probe_batch_size: Repetitions in the initial timing probe.
        max_batch_size: Hard ceiling on repetitions per timed batch.
        warming_runs: Untimed repetitions before any measurement.
        time_threshold: Wall-clock budget for the measurement phase, in seconds.
        batch_ratio: Fraction of ``time_threshold`` one calibrated batch
            should take.
        round_batch_size: Round calibrated batch sizes down to two
            significant digits (e.g. 2037 -> 2000).
    """

    probe_batch_size: int = 10
    max_batch_size: int = 1_000_000_000
    warming_runs: int = 5
    time_threshold: float = 0.5
    batch_ratio: float = 0.1
    round_batch_size: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check every field, raising on the first invalid one.

        Raises:
            InvalidOptionError: If any option is out of range, or a count is
                not an int.
        """
        for field in ("probe_batch_size", "max_batch_size", "warming_runs"):
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidOptionError(
                    f"Invalid {field}; must be an int but got {type(value).__name__} {value!r}"
                )
        if self.probe_batch_size < 1:
            raise InvalidOptionError(
                f"Invalid probe_batch_size; must be greater than 0 but got {self.probe_batch_size}"
            )
        if self.max_batch_size < self.probe_batch_size:
            raise InvalidOptionError(
                f"Invalid max_batch_size; must be at least probe_batch_size "
                f"({self.probe_batch_size}) but got {self.max_batch_size}"
            )
        if self.warming_runs < 0:
            raise InvalidOptionError(
                f"Invalid warming_runs; must be non-negative but got {self.warming_runs}"
            )
        if not self.time_threshold > 0.0:
            raise InvalidOptionError(
                f"Invalid time_threshold; must be greater than 0 but got {self.time_threshold}"
            )
        if not 0.0 < self.batch_ratio <= 1.0:
            raise InvalidOptionError(
                f"Invalid batch_ratio; must be in (0, 1] but got {self.batch_ratio}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return options with every field at its default."""
        return cls()

    @property
    def target_batch_time(self) -> float:
        """Seconds one calibrated batch should ideally take."""
        return self.batch_ratio * self.time_threshold

    def _replace(self, **changes) -> Self:
        fields = asdict(self)
        fields.update(changes)
        return type(self)(**fields)

    def with_probe_batch_size(self, value: int) -> Self:
        return self._replace(probe_batch_size=value)

    def with_max_batch_size(self, value: int) -> Self:
        return self._replace(max_batch_size=value)

    def with_warming_runs(self, value: int) -> Self:
        return self._replace(warming_runs=value)

    def with_time_threshold(self, value: float) -> Self:
        return self._replace(time_threshold=value)

    def with_batch_ratio(self, value: float) -> Self:
        return self._replace(batch_ratio=value)

    def with_round_batch_size(self, value: bool) -> Self:
        return self._replace(round_batch_size=value)
