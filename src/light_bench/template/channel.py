"""A text sink that can apply an active template to report sources."""

from __future__ import annotations

import io
from typing import Any, Self, TextIO

from light_bench.template.compiler import CompiledTemplate
from light_bench.template.render import ReportSource


class _NoTemplate:
    """Marker type; writing ``NO_TEMPLATE`` clears a channel's active template."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_TEMPLATE"


NO_TEMPLATE = _NoTemplate()


class TemplateChannel:
    """Routes writes to a sink, rendering report sources through a template.

    Writing a ``CompiledTemplate`` makes it the active template and outputs
    nothing. Writing a report source renders the active template into the
    channel's buffer, flushes the buffer to the sink and clears it; the
    template stays active. Strings are written through unchanged, and
    ``NO_TEMPLATE`` deactivates templating.

    A channel owns one buffer and is not safe to share between threads.
    """

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._buffer = io.StringIO()
        self._template: CompiledTemplate | None = None

    @property
    def template(self) -> CompiledTemplate | None:
        return self._template

    @property
    def out(self) -> TextIO:
        return self._out

    def set_template(self, template: CompiledTemplate | None) -> Self:
        self._template = template
        return self

    def clear_template(self) -> Self:
        self._template = None
        return self

    def write(self, item: Any) -> Self:
        """Write one item; returns the channel so writes can be chained.

        Raises:
            TypeError: If ``item`` is neither a template, ``NO_TEMPLATE``,
                a string nor a report source.
        """
        if isinstance(item, CompiledTemplate):
            return self.set_template(item)
        if item is NO_TEMPLATE:
            return self.clear_template()
        if isinstance(item, str):
            self._out.write(item)
            return self
        if isinstance(item, ReportSource):
            return self.emit(item)
        raise TypeError(f"Invalid channel item; expected template, str or report source but got {type(item).__name__}")

    def emit(self, source: ReportSource) -> Self:
        """Render the active template against ``source`` and flush it.

        Without an active template this is a no-op. If rendering fails nothing
        reaches the sink and the buffer is still cleared.
        """
        if self._template is None:
            return self
        try:
            self._template.render_to(self._buffer.write, source)
            self._out.write(self._buffer.getvalue())
        finally:
            self._buffer.seek(0)
            self._buffer.truncate(0)
        return self

    def flush(self) -> None:
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()
