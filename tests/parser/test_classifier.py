# topmark:header:start
#
#   project      : TSErrors
#   file         : test_classifier.py
#   file_relpath : tests/parser/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the type-literal classifier."""

from __future__ import annotations

from tests.conftest import parametrize
from tserrors.constants import MIN_TYPE_LITERAL_LENGTH
from tserrors.parser.classifier import has_type_shape, is_pure_type_literal, starts_like_type


@parametrize(
    "content",
    [
        "{ a: string; b: number; c: boolean }",
        "Array<{ id: number; name: string }>",
        "(value: string, index: number) => void",
        "x => string | number | undefined | null",
        "Promise<string | number | boolean | null>",
        "[{ id: number }, { name: string }, null]",
    ],
)
def test_type_literals_are_code(content: str) -> None:
    """Long, type-opening, type-shaped spans are classified as code."""
    assert is_pure_type_literal(content)


def test_length_gate_rejects_short_object_type() -> None:
    """``{ a: string; b: number }`` is 24 characters: below the threshold."""
    content = "{ a: string; b: number }"
    assert len(content) < MIN_TYPE_LITERAL_LENGTH
    assert starts_like_type(content)
    assert has_type_shape(content)
    assert not is_pure_type_literal(content)


def test_length_gate_is_inclusive() -> None:
    """Exactly ``MIN_TYPE_LITERAL_LENGTH`` characters passes the length gate."""
    content = "{ a: string }".ljust(MIN_TYPE_LITERAL_LENGTH - 1) + "}"
    assert len(content) == MIN_TYPE_LITERAL_LENGTH
    assert is_pure_type_literal(content)
    assert not is_pure_type_literal(content[1:])


@parametrize(
    "content",
    [
        "string | number | boolean | undefined | null",
        "this is a long sentence about a: Thing",
        "Property 'x' does not exist on type 'Y'",
        "foo<string | number | boolean | undefined>",
    ],
)
def test_opening_gate_rejects(content: str) -> None:
    """Spans that do not open like a type stay text."""
    assert len(content) >= MIN_TYPE_LITERAL_LENGTH
    assert not starts_like_type(content)
    assert not is_pure_type_literal(content)


def test_shape_gate_rejects_plain_tuple() -> None:
    """A bracketed list without annotations, objects, unions or arrows stays text."""
    content = "[string, number, boolean, undefined, null]"
    assert starts_like_type(content)
    assert not has_type_shape(content)
    assert not is_pure_type_literal(content)


@parametrize(
    "content, expected",
    [
        ("{", True),
        ("[", True),
        ("(", True),
        ("Map<", True),
        ("A_1<", True),
        ("map<", False),
        ("cb=>", True),
        ("cb  =>", True),
        ("Cb =>", False),
        ("( a", True),
        ("<T>", False),
    ],
)
def test_starts_like_type(content: str, expected: bool) -> None:
    """Openers and head patterns are anchored at the start."""
    assert starts_like_type(content) is expected


@parametrize(
    "content, expected",
    [
        ("x: Foo", True),
        ("x:Foo", True),
        ("x: 1", False),
        ("{}", True),
        ("{\n}", True),
        ("A | B", True),
        ("A & B", True),
        ("a => b", True),
        ("plain words", False),
    ],
)
def test_has_type_shape(content: str, expected: bool) -> None:
    """Type-shaped patterns may appear anywhere in the span."""
    assert has_type_shape(content) is expected
