# topmark:header:start
#
#   project      : TSErrors
#   file         : segments.py
#   file_relpath : src/tserrors/parser/segments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Segment value objects produced by the segmenter."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from tserrors.constants import DEFAULT_CODE_LANG


class SegmentKind(str, Enum):
    """Kind of a message segment."""

    TEXT = "text"
    CODE = "code"


@dataclass(frozen=True)
class Segment:
    """A typed span of a diagnostic message.

    Segments are immutable. A formatting result for a code segment is applied
    by building a replacement with `with_content`; kind and position in the
    list stay the same.

    Attributes:
        kind (SegmentKind): Text or code.
        content (str): Segment text; never empty when produced by the segmenter.
        lang (str | None): Language tag; always set for code segments.
    """

    kind: SegmentKind
    content: str
    lang: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SegmentKind.CODE and self.lang is None:
            object.__setattr__(self, "lang", DEFAULT_CODE_LANG)

    @classmethod
    def text(cls, content: str) -> Segment:
        """Return a text segment."""
        return cls(SegmentKind.TEXT, content)

    @classmethod
    def code(cls, content: str, lang: str = DEFAULT_CODE_LANG) -> Segment:
        """Return a code segment tagged with ``lang``."""
        return cls(SegmentKind.CODE, content, lang)

    @property
    def is_code(self) -> bool:
        """Whether this is a code segment."""
        return self.kind is SegmentKind.CODE

    def with_content(self, content: str) -> Segment:
        """Return a copy of this segment with new content."""
        return replace(self, content=content)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping (``lang`` omitted for text segments)."""
        out: dict[str, Any] = {"kind": self.kind.value, "content": self.content}
        if self.lang is not None:
            out["lang"] = self.lang
        return out
