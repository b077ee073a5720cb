# topmark:header:start
#
#   project      : TSErrors
#   file         : markdown.py
#   file_relpath : src/tserrors/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering of segmented diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tserrors.constants import DEFAULT_CODE_LANG

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tserrors.core.diagnostics import DiagnosticRecord
    from tserrors.parser.segments import Segment


def to_markdown(segments: Sequence[Segment]) -> list[str]:
    """Render segments as Markdown lines.

    Text segments are stripped and emitted when non-empty. Code segments become
    a fenced block surrounded by blank lines; blank lines inside the code are
    dropped.

    Args:
        segments (Sequence[Segment]): Segments in message order.

    Returns:
        list[str]: Lines to be joined with ``"\\n"``.
    """
    lines: list[str] = []
    for seg in segments:
        if seg.is_code:
            lines.append("")
            lines.append(f"```{seg.lang or DEFAULT_CODE_LANG}")
            lines.extend(line for line in seg.content.split("\n") if line)
            lines.append("```")
            lines.append("")
        else:
            text: str = seg.content.strip()
            if text:
                lines.append(text)
    return lines


@dataclass(frozen=True)
class RenderedDiagnostic:
    """A diagnostic ready for display.

    Attributes:
        title (str): Window / section title.
        lines (tuple[str, ...]): Markdown body lines.
    """

    title: str
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        """Body lines joined with newlines."""
        return "\n".join(self.lines)


def header_lines(record: DiagnosticRecord) -> list[str]:
    """Return the ``**Code:**`` / ``**Source:**`` header, each followed by a blank line."""
    lines: list[str] = []
    if record.code is not None:
        lines.extend((f"**Code:** {record.code}", ""))
    if record.source:
        lines.extend((f"**Source:** {record.source}", ""))
    return lines


def render_diagnostic(
    record: DiagnosticRecord,
    segments: Sequence[Segment],
    *,
    title: str | None = None,
) -> RenderedDiagnostic:
    """Render ``record`` with its (possibly formatted) segments.

    Args:
        record (DiagnosticRecord): The diagnostic; supplies header metadata.
        segments (Sequence[Segment]): Segments of ``record.message``.
        title (str | None): Fixed title; defaults to the severity title.

    Returns:
        RenderedDiagnostic: Title and Markdown lines.
    """
    return RenderedDiagnostic(
        title=title or record.title,
        lines=tuple(header_lines(record) + to_markdown(segments)),
    )
