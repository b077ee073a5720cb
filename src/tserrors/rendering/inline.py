# topmark:header:start
#
#   project      : TSErrors
#   file         : inline.py
#   file_relpath : src/tserrors/rendering/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-line diagnostic messages with formatted types.

Meant for places that only accept one string per diagnostic (status lines,
virtual text, hover fallbacks). Code segments are quoted with ``'`` using, in
order of preference:

1. the cached formatting;
2. a blocking `FormatterClient.format_sync` when ``sync_format`` is set;
3. the raw content, while an async job warms the cache for next time
   (only started when an event loop is running).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tserrors.config.logging import get_logger
from tserrors.formatter.client import event_loop_running
from tserrors.parser.segmenter import segment

if TYPE_CHECKING:
    from tserrors.config.logging import TsErrorsLogger
    from tserrors.core.diagnostics import DiagnosticRecord
    from tserrors.formatter.client import FormatterClient

logger: TsErrorsLogger = get_logger(__name__)


def _ignore(_text: str, _error: str | None) -> None:
    pass


def format_inline(record: DiagnosticRecord | None, client: FormatterClient) -> str:
    """Return ``record.message`` as one line with code segments formatted.

    Args:
        record (DiagnosticRecord | None): The diagnostic.
        client (FormatterClient): Formatter client; its config decides sync
            vs. async behavior on a cache miss.

    Returns:
        str: Parts joined by single spaces; ``""`` when there is no message.
    """
    if record is None or not record.message:
        return ""

    result: list[str] = []
    for seg in segment(record.message):
        if not seg.is_code:
            result.append(seg.content.strip())
            continue

        cached: str | None = client.cache.get(seg.content)
        if cached is not None:
            text: str = cached
        elif client.config.sync_format:
            text = client.format_sync(seg.content)
        else:
            text = seg.content
            if event_loop_running():
                client.format_async(seg.content, _ignore)
            else:
                logger.debug("No running event loop; skipping background formatting")
        result.append(f"'{text}'")

    return " ".join(result)
