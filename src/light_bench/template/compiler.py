"""Compile ``{{name[:format]}}`` placeholder templates into replayable form.

A template string is scanned once, left to right, by a four-state machine.
Only doubled braces delimit a placeholder; single braces are ordinary text.
The result is a ``CompiledTemplate`` holding three parallel sequences:

    guide     one flag per output chunk, True for a field and False for text
    literals  the text chunks, in order, never empty
    fields    the compiled ``FieldSpec`` entries, in order

Rendering walks ``guide`` with one cursor over ``literals`` and one over
``fields``, so a template is parsed exactly once however often it is used.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Self

from msgspec import Struct

from light_bench.errors import MalformedPlaceholderError, UnterminatedPlaceholderError

if TYPE_CHECKING:
    from light_bench.template.render import ReportSource


class _ScanState(IntEnum):
    LITERAL = 0
    SEEN_OPEN = 1
    IN_PLACEHOLDER = 2
    SEEN_CLOSE = 3


class FieldSpec(Struct, frozen=True):
    """A compiled placeholder: trimmed field name and optional format specifier."""

    name: str
    format_spec: str | None = None

    @classmethod
    def parse(cls, body: str) -> Self:
        """Split a raw placeholder body on its first ':'.

        Raises:
            MalformedPlaceholderError: If ':' is the first or last character,
                or the field name is blank.
        """
        i = body.find(":")
        if i < 0:
            name, format_spec = body.strip(), None
        elif 0 < i < len(body) - 1:
            name = body[:i].strip()
            format_spec = body[i + 1 :].strip() or None
        else:
            raise MalformedPlaceholderError(f"Invalid placeholder {{{{{body}}}}}; misplaced ':'")

        if not name:
            raise MalformedPlaceholderError(f"Invalid placeholder {{{{{body}}}}}; missing field name")
        return cls(name=name, format_spec=format_spec)

    def resolve(self, source: ReportSource) -> str:
        if self.format_spec is None:
            return source.resolve(self.name)
        return source.resolve(self.name, self.format_spec)


class CompiledTemplate(Struct, frozen=True):
    """The replayable form of a template string. Build with ``compile_template``."""

    source: str
    guide: tuple[bool, ...]
    literals: tuple[str, ...]
    fields: tuple[FieldSpec, ...]

    def __post_init__(self):
        if len(self.guide) != len(self.literals) + len(self.fields):
            raise ValueError("Inconsistent template; guide does not match literals and fields")
        if sum(self.guide) != len(self.fields):
            raise ValueError("Inconsistent template; guide does not match fields")

    @classmethod
    def compile(cls, spec: str) -> Self:
        return compile_template(spec)

    @property
    def is_empty(self) -> bool:
        return not self.guide

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def render(self, source: ReportSource) -> str:
        parts: list[str] = []
        self.render_to(parts.append, source)
        return "".join(parts)

    def render_to(self, write, source: ReportSource) -> None:
        """Feed each rendered chunk to ``write`` in order."""
        it_fix = iter(self.literals)
        it_var = iter(self.fields)
        for is_var in self.guide:
            if is_var:
                write(next(it_var).resolve(source))
            else:
                write(next(it_fix))

    def dump(self) -> str:
        """Describe the compiled entries, one per line."""
        lines = []
        it_fix = iter(self.literals)
        it_var = iter(self.fields)
        for is_var in self.guide:
            if is_var:
                v = next(it_var)
                if v.format_spec is None:
                    lines.append(f"var: ({v.name})")
                else:
                    lines.append(f"var: ({v.name}, {v.format_spec})")
            else:
                lines.append(f"fix: {next(it_fix)!r}")
        return "\n".join(lines)


def compile_template(spec: str) -> CompiledTemplate:
    """Compile a template string.

    Args:
        spec: Text with ``{{name}}`` or ``{{name: fmt}}`` placeholders.

    Returns:
        The compiled template.

    Raises:
        MalformedPlaceholderError: A placeholder body is invalid.
        UnterminatedPlaceholderError: The input ends inside a placeholder.
    """
    guide: list[bool] = []
    literals: list[str] = []
    fields: list[FieldSpec] = []

    def add_fix(b: int, e: int) -> None:
        if e > b:
            guide.append(False)
            literals.append(spec[b:e])

    state = _ScanState.LITERAL
    fix_b = 0
    var_b = 0

    for i, c in enumerate(spec):
        if state is _ScanState.LITERAL:
            if c == "{":
                state = _ScanState.SEEN_OPEN
        elif state is _ScanState.SEEN_OPEN:
            if c == "{":
                add_fix(fix_b, i - 1)
                var_b = i + 1
                state = _ScanState.IN_PLACEHOLDER
            else:
                state = _ScanState.LITERAL
        elif state is _ScanState.IN_PLACEHOLDER:
            if c == "}":
                state = _ScanState.SEEN_CLOSE
        else:
            if c == "}":
                guide.append(True)
                fields.append(FieldSpec.parse(spec[var_b : i - 1]))
                fix_b = i + 1
                state = _ScanState.LITERAL
            else:
                # a lone '}' belongs to the placeholder body
                state = _ScanState.IN_PLACEHOLDER

    if state >= _ScanState.IN_PLACEHOLDER:
        raise UnterminatedPlaceholderError(
            f"Incomplete template; placeholder opened at offset {var_b - 2} is never closed"
        )

    add_fix(fix_b, len(spec))
    return CompiledTemplate(
        source=spec,
        guide=tuple(guide),
        literals=tuple(literals),
        fields=tuple(fields),
    )
