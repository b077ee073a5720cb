# topmark:header:start
#
#   project      : TSErrors
#   file         : test_markdown.py
#   file_relpath : tests/rendering/test_markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for Markdown rendering of diagnostics."""

from __future__ import annotations

from tests.fakes import OBJ_TYPE_PRETTY
from tserrors.core.diagnostics import DiagnosticRecord, Severity
from tserrors.parser.segments import Segment
from tserrors.rendering.markdown import RenderedDiagnostic, render_diagnostic, to_markdown


def test_text_segments_are_stripped_and_blank_ones_dropped() -> None:
    """Whitespace-only text produces no line."""
    lines: list[str] = to_markdown([Segment.text("  Type "), Segment.text("   "), Segment.text("x")])
    assert lines == ["Type", "x"]


def test_code_segment_becomes_fenced_block() -> None:
    """Code is fenced with its language and surrounded by blank lines."""
    lines: list[str] = to_markdown(
        [Segment.text("Type "), Segment.code(OBJ_TYPE_PRETTY), Segment.text(" is bad.")]
    )
    assert lines == [
        "Type",
        "",
        "```typescript",
        "{",
        "  a: string;",
        "  b: number;",
        "  c: boolean;",
        "}",
        "```",
        "",
        "is bad.",
    ]


def test_blank_lines_inside_code_are_dropped() -> None:
    """Empty lines within a code segment are removed."""
    lines: list[str] = to_markdown([Segment.code("{\n\n  a: 1;\n\n}")])
    assert lines == ["", "```typescript", "{", "  a: 1;", "}", "```", ""]


def test_render_diagnostic_header_order_and_title() -> None:
    """Code comes before Source; each header line is followed by a blank line."""
    record = DiagnosticRecord("Oops", severity=Severity.WARNING, source="ts", code=2322)
    view: RenderedDiagnostic = render_diagnostic(record, [Segment.text("Oops")])
    assert view.title == " Warning "
    assert view.lines == ("**Code:** 2322", "", "**Source:** ts", "", "Oops")
    assert view.text == "**Code:** 2322\n\n**Source:** ts\n\nOops"


def test_render_diagnostic_without_metadata() -> None:
    """No severity means the generic title; no header lines are emitted."""
    view: RenderedDiagnostic = render_diagnostic(DiagnosticRecord("x"), [Segment.text("x")])
    assert view.title == " Diagnostic "
    assert view.lines == ("x",)


def test_render_diagnostic_fixed_title() -> None:
    """An explicit title overrides the severity title."""
    record = DiagnosticRecord("x", severity=Severity.ERROR)
    assert render_diagnostic(record, [], title="TS").title == "TS"
    assert render_diagnostic(record, []).title == " Error "
