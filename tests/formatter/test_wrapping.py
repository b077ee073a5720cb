# topmark:header:start
#
#   project      : TSErrors
#   file         : test_wrapping.py
#   file_relpath : tests/formatter/test_wrapping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for ellipsis sanitizing and type-alias wrapping."""

from __future__ import annotations

from tests.conftest import parametrize
from tserrors.formatter.wrapping import restore, sanitize, unwrap, wrap


def test_wrap_embeds_expression_in_alias() -> None:
    """The expression becomes the right-hand side of a synthetic alias."""
    assert wrap("{ a: string }") == "type __TSErrorsType__ = { a: string };"


def test_wrap_sanitizes_ellipsis() -> None:
    """Truncation markers are replaced before formatting."""
    assert wrap("{ a: string; ...; }") == "type __TSErrorsType__ = { a: string; __TS_ELLIPSIS__; };"


@parametrize(
    "output, expected",
    [
        ("type __TSErrorsType__ = { a: string };\n", "{ a: string }"),
        ("type __TSErrorsType__ = {\n  a: string;\n};\n", "{\n  a: string;\n}"),
        ("type __TSErrorsType__ = string | number;", "string | number"),
        ("type __TSErrorsType__ =\n  | A\n  | B;\n", "| A\n  | B"),
        ("type __TSErrorsType__ = { x: __TS_ELLIPSIS__ };\n", "{ x: ... }"),
    ],
)
def test_unwrap(output: str, expected: str) -> None:
    """Prefix, final semicolon and one trailing newline are removed."""
    assert unwrap(output) == expected


def test_unwrap_keeps_inner_semicolons() -> None:
    """Only the semicolon at the very end is stripped."""
    assert unwrap("type __TSErrorsType__ = {\n  a: 1;\n  b: 2;\n};\n") == "{\n  a: 1;\n  b: 2;\n}"


def test_unwrap_of_wrap_restores_input() -> None:
    """Unwrapping unformatted wrapped text gives back the original."""
    original = "{ a: string; ...; b: Array<...> }"
    assert unwrap(wrap(original)) == original


def test_sanitize_restore() -> None:
    """`restore` inverts `sanitize`."""
    assert sanitize("...") == "__TS_ELLIPSIS__"
    assert restore(sanitize("a ... b ...;")) == "a ... b ...;"
