# topmark:header:start
#
#   project      : TSErrors
#   file         : segmenter.py
#   file_relpath : src/tserrors/parser/segmenter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split a diagnostic message into text and code segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tserrors.config.logging import get_logger
from tserrors.constants import DEFAULT_CODE_LANG
from tserrors.parser.classifier import is_pure_type_literal
from tserrors.parser.matcher import QUOTE, find_closing_quote
from tserrors.parser.segments import Segment

if TYPE_CHECKING:
    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)


def segment(message: str | None) -> list[Segment]:
    """Segment ``message`` into an ordered list of `Segment` objects.

    Quoted spans that pass `is_pure_type_literal` become code segments tagged
    ``typescript``; other quoted spans become text wrapped in backticks (the
    quotes themselves are dropped). An opening quote without a match turns the
    rest of the message, quote included, into one text segment. No segment is
    ever empty.

    Args:
        message (str | None): Raw diagnostic message.

    Returns:
        list[Segment]: Segments in message order; empty for ``None`` or ``""``.
    """
    if not message:
        return []

    parts: list[Segment] = []
    pos: int = 0
    length: int = len(message)

    while pos < length:
        quote_start: int = message.find(QUOTE, pos)
        if quote_start == -1:
            parts.append(Segment.text(message[pos:]))
            break

        if quote_start > pos:
            parts.append(Segment.text(message[pos:quote_start]))

        quote_end: int | None = find_closing_quote(message, quote_start + 1)
        if quote_end is None:
            logger.trace("Unmatched quote at %d; keeping remainder as text", quote_start)
            parts.append(Segment.text(message[quote_start:]))
            break

        quoted: str = message[quote_start + 1 : quote_end]
        if is_pure_type_literal(quoted):
            parts.append(Segment.code(quoted, DEFAULT_CODE_LANG))
        else:
            parts.append(Segment.text(f"`{quoted}`"))

        pos = quote_end + 1

    logger.trace("Segmented message into %d part(s)", len(parts))
    return parts
