"""Rendering compiled templates against report sources."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Integral, Real
from typing import Any, Protocol, runtime_checkable

from light_bench.errors import FormatSpecError
from light_bench.template.compiler import CompiledTemplate

# Rendered in place of any field a source does not recognise.
UNKNOWN_FIELD = "####"

DEFAULT_STR_FORMAT = "%s"
DEFAULT_INT_FORMAT = "%d"
DEFAULT_FLOAT_FORMAT = "%g"


@runtime_checkable
class ReportSource(Protocol):
    """Anything that can answer "what is field X, formatted how?".

    ``resolve`` must be a pure function of its arguments and the source's own
    snapshot data. Unrecognised names return ``UNKNOWN_FIELD``.
    """

    def resolve(self, name: str, format_spec: str | None = None) -> str: ...


def sformat(value: Any, fmt: str) -> str:
    """Apply a printf-style specifier such as ``%-8s`` or ``%10.4f``.

    C length modifiers (``%lu``, ``%ld``) are accepted and ignored.

    Raises:
        FormatSpecError: If ``fmt`` does not consume exactly one value of a
            compatible type.
    """
    try:
        return fmt % (value,)
    except (TypeError, ValueError) as e:
        raise FormatSpecError(f"Cannot format {value!r} with {fmt!r}: {e}") from e


def default_format(value: Any) -> str:
    """The printf specifier used for ``value`` when a placeholder gives none."""
    if isinstance(value, bool) or isinstance(value, str):
        return DEFAULT_STR_FORMAT
    if isinstance(value, Integral):
        return DEFAULT_INT_FORMAT
    if isinstance(value, Real):
        return DEFAULT_FLOAT_FORMAT
    return DEFAULT_STR_FORMAT


def format_value(value: Any, format_spec: str | None = None) -> str:
    if format_spec is None:
        if isinstance(value, str):
            return value
        format_spec = default_format(value)
    return sformat(value, format_spec)


class MappingSource:
    """ReportSource over a name to value mapping.

    Values are formatted with the placeholder's specifier, or with a default
    picked from the value's type (strings verbatim, ``%d`` for integers,
    ``%g`` for floats).
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = dict(values)

    def resolve(self, name: str, format_spec: str | None = None) -> str:
        try:
            value = self._values[name]
        except KeyError:
            return UNKNOWN_FIELD
        return format_value(value, format_spec)

    def __repr__(self) -> str:
        return f"MappingSource({self._values!r})"


def render(template: CompiledTemplate, source: ReportSource) -> str:
    """Render ``template`` once against ``source``."""
    return template.render(source)
