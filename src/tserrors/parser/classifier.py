# topmark:header:start
#
#   project      : TSErrors
#   file         : classifier.py
#   file_relpath : src/tserrors/parser/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Heuristic classification of quoted spans as type literals.

Only spans classified as type literals are sent to the external formatter.
The rules are conservative: treating a real type as text is harmless, while
sending prose to the formatter would fail or mangle it.
"""

from __future__ import annotations

import re
from typing import Final

from tserrors.constants import MIN_TYPE_LITERAL_LENGTH

# Gate 2: how a type literal may start.
_TYPE_OPENERS: Final[tuple[str, ...]] = ("{", "[", "(")
_TYPE_HEAD_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"[A-Z][A-Za-z0-9_]*<"),  # generic instantiation: Array<...
    re.compile(r"[a-z]+\s*=>"),  # arrow function head: x =>
    re.compile(r"\(\s*[a-z]"),  # parameter list head: (a
)

# Gate 3: something type-shaped somewhere in the span.
_TYPE_BODY_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r":\s*[A-Za-z]"),  # annotation
    re.compile(r"\{.*?\}", re.DOTALL),  # object shape
    re.compile(r"[|&]"),  # union / intersection
    re.compile(r"=>"),  # arrow
)


def starts_like_type(content: str) -> bool:
    """Return whether ``content`` opens like a type expression."""
    return content.startswith(_TYPE_OPENERS) or any(
        p.match(content) for p in _TYPE_HEAD_PATTERNS
    )


def has_type_shape(content: str) -> bool:
    """Return whether ``content`` contains at least one type-shaped pattern."""
    return any(p.search(content) for p in _TYPE_BODY_PATTERNS)


def is_pure_type_literal(content: str) -> bool:
    """Return whether a quoted span should be formatted as code.

    Gates, in order (fail fast):
        1. at least ``MIN_TYPE_LITERAL_LENGTH`` characters;
        2. `starts_like_type`;
        3. `has_type_shape`.

    Args:
        content (str): The text between the quotes.

    Returns:
        bool: True if the span passes all three gates.
    """
    if len(content) < MIN_TYPE_LITERAL_LENGTH:
        return False
    if not starts_like_type(content):
        return False
    return has_type_shape(content)
