"""Tests for the template compiler state machine."""

import pytest

from light_bench.errors import (
    CompileError,
    MalformedPlaceholderError,
    UnterminatedPlaceholderError,
)
from light_bench.template import CompiledTemplate, FieldSpec, compile_template


class TestCompileStructure:
    """Shape of the compiled guide, literal and field sequences."""

    def test_literal_only(self):
        t = compile_template("plain text")
        assert t.guide == (False,)
        assert t.literals == ("plain text",)
        assert t.fields == ()

    def test_empty_template(self):
        t = compile_template("")
        assert t.is_empty
        assert t.guide == ()

    def test_fields_and_literals_interleave(self):
        t = compile_template("{{ a : %d }}-{{ b }}")
        assert t.guide == (True, False, True)
        assert t.literals == ("-",)
        assert t.fields == (FieldSpec("a", "%d"), FieldSpec("b"))

    def test_back_to_back_placeholders_have_no_literals(self):
        t = compile_template("{{a}}{{b}}")
        assert t.literals == ()
        assert t.field_names == ("a", "b")
        assert t.guide == (True, True)

    def test_guide_invariant(self):
        t = compile_template("x{{a}}y{{b:%s}}{{c}}z")
        assert len(t.guide) == len(t.literals) + len(t.fields)
        assert t.literals == ("x", "y", "z")

    def test_single_braces_are_literal(self):
        t = compile_template("{a} and } and {")
        assert t.fields == ()
        assert t.literals == ("{a} and } and {",)

    def test_lone_close_brace_stays_in_placeholder(self):
        t = compile_template("{{a}b}}")
        assert t.fields == (FieldSpec("a}b"),)

    def test_extra_close_brace_is_literal(self):
        t = compile_template("{{a}}}")
        assert t.guide == (True, False)
        assert t.literals == ("}",)

    def test_default_report_template(self):
        t = compile_template(
            "{{jobname : %-28s}}:  {{times: %10lu}}  | {{secs: %10.4f}} s  | {{mps: %10.2f}} MPS\n"
        )
        assert t.field_names == ("jobname", "times", "secs", "mps")
        assert t.fields[0].format_spec == "%-28s"
        assert t.literals[-1] == " MPS\n"

    def test_source_is_kept(self):
        assert compile_template("a{{b}}").source == "a{{b}}"

    def test_classmethod_compile(self):
        assert CompiledTemplate.compile("{{a}}") == compile_template("{{a}}")


class TestFieldSpecParsing:
    """Splitting placeholder bodies into name and format."""

    def test_trims_name_and_format(self):
        assert FieldSpec.parse("  name :  %5d  ") == FieldSpec("name", "%5d")

    def test_no_format(self):
        assert FieldSpec.parse(" name ").format_spec is None

    def test_splits_on_first_colon(self):
        assert FieldSpec.parse("t:%H:%M") == FieldSpec("t", "%H:%M")

    def test_blank_format_is_absent(self):
        assert FieldSpec.parse("a:  ").format_spec is None

    @pytest.mark.parametrize("body", [":fmt", "name:", ":", "", "   ", " : x"])
    def test_malformed(self, body):
        with pytest.raises(MalformedPlaceholderError):
            FieldSpec.parse(body)


class TestCompileErrors:
    """Compile-time failures."""

    @pytest.mark.parametrize("spec", ["text {{ a", "{{a}", "x {{", "{{a:%d}"])
    def test_unterminated(self, spec):
        with pytest.raises(UnterminatedPlaceholderError):
            compile_template(spec)

    def test_trailing_single_open_brace_is_fine(self):
        assert compile_template("text {").literals == ("text {",)

    @pytest.mark.parametrize("spec", ["{{:x}}", "{{a:}}", "pre {{}} post"])
    def test_malformed_placeholder(self, spec):
        with pytest.raises(MalformedPlaceholderError):
            compile_template(spec)

    def test_errors_share_base(self):
        with pytest.raises(CompileError):
            compile_template("{{")
        with pytest.raises(ValueError):
            compile_template("{{:}}")


class TestDump:
    def test_dump_lists_entries(self):
        t = compile_template("Record [{{index : %2d}}]: {{name}}")
        assert t.dump().splitlines() == [
            "fix: 'Record ['",
            "var: (index, %2d)",
            "fix: ']: '",
            "var: (name)",
        ]
