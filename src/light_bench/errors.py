"""Exception hierarchy shared by the benchmark harness and template engine."""

from __future__ import annotations


class LightBenchError(Exception):
    """Root of every error raised by light_bench itself.

    Failures raised by user jobs are never wrapped in this type.
    """


class ConfigurationError(LightBenchError, ValueError):
    """A configuration record holds an unusable value."""


class InvalidOptionError(ConfigurationError):
    """A BenchmarkOptions field is out of range.

    Raised before any job invocation takes place.
    """


class TemplateError(LightBenchError):
    """Base class for template compilation and rendering failures."""


class CompileError(TemplateError, ValueError):
    """A template string could not be compiled."""


class MalformedPlaceholderError(CompileError):
    """A placeholder body has no field name, or a dangling ':' separator."""


class UnterminatedPlaceholderError(CompileError):
    """The template ended while a placeholder was still open."""


class FormatSpecError(TemplateError, ValueError):
    """A printf-style format specifier could not be applied to a value."""
