# topmark:header:start
#
#   project      : TSErrors
#   file         : wrapping.py
#   file_relpath : src/tserrors/formatter/wrapping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prepare type expressions for the formatter and undo it afterwards.

A bare type expression is not a TypeScript program, so it is embedded as the
right-hand side of a synthetic alias (``type __TSErrorsType__ = <expr>;``).
Compiler diagnostics truncate long types with ``...``, which the parser rejects;
it is swapped for a placeholder identifier before formatting and restored after.
"""

from __future__ import annotations

import re
from typing import Final

from tserrors.constants import ELLIPSIS_PLACEHOLDER, ELLIPSIS_TOKEN, WRAPPER_TYPE_NAME

_PREFIX_RE: Final[re.Pattern[str]] = re.compile(rf"^type {WRAPPER_TYPE_NAME} =\s*")
_SUFFIX_RE: Final[re.Pattern[str]] = re.compile(r";\s*$")


def sanitize(content: str) -> str:
    """Replace ellipsis markers (including ``...;``) with the placeholder token."""
    return content.replace(ELLIPSIS_TOKEN, ELLIPSIS_PLACEHOLDER)


def restore(content: str) -> str:
    """Turn placeholder tokens back into ``...``."""
    return content.replace(ELLIPSIS_PLACEHOLDER, ELLIPSIS_TOKEN)


def wrap(content: str) -> str:
    """Return the sanitized ``content`` wrapped in the synthetic type alias."""
    return f"type {WRAPPER_TYPE_NAME} = {sanitize(content)};"


def unwrap(output: str) -> str:
    """Recover the formatted type expression from formatter output.

    Strips one trailing newline, the alias prefix and the final semicolon, then
    restores ellipsis markers.
    """
    text: str = output[:-1] if output.endswith("\n") else output
    text = _PREFIX_RE.sub("", text, count=1)
    text = _SUFFIX_RE.sub("", text, count=1)
    return restore(text)
