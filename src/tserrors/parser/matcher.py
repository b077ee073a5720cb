# topmark:header:start
#
#   project      : TSErrors
#   file         : matcher.py
#   file_relpath : src/tserrors/parser/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closing-quote search that respects nested delimiters.

Type strings in compiler diagnostics contain unescaped structural characters
(object types, generics, tuples, function types), so the next ``'`` is not
necessarily the closing quote. `find_closing_quote` only accepts a quote when
``{}``, ``[]``, ``()`` and ``<>`` are each back at depth zero.
"""

from __future__ import annotations

from typing import Final

QUOTE: Final[str] = "'"

# Opening/closing character -> (counter index, delta)
_DELIMITERS: Final[dict[str, tuple[int, int]]] = {
    "{": (0, 1),
    "}": (0, -1),
    "[": (1, 1),
    "]": (1, -1),
    "(": (2, 1),
    ")": (2, -1),
    "<": (3, 1),
    ">": (3, -1),
}


def find_closing_quote(text: str, start: int) -> int | None:
    """Return the index of the quote closing a quoted span, or ``None``.

    Each delimiter class has its own counter. Counters may go negative on
    malformed input; that is tolerated and never corrected, and classes are not
    cross-checked against each other. Balance is only required at the moment a
    candidate quote is seen.

    Args:
        text (str): The full message.
        start (int): Offset of the character right after the opening quote.

    Returns:
        int | None: Index of the closing quote, or ``None`` if the end of
        ``text`` is reached first.
    """
    depth: list[int] = [0, 0, 0, 0]
    for i in range(start, len(text)):
        c: str = text[i]
        if c == QUOTE:
            if not any(depth):
                return i
            continue
        hit: tuple[int, int] | None = _DELIMITERS.get(c)
        if hit is not None:
            depth[hit[0]] += hit[1]
    return None
