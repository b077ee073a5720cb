# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message segmentation engine.

Splits a diagnostic message into an ordered list of `Segment` objects: plain
text, inline-code text for short quoted spans, and code segments for quoted
spans that look like type literals.

Modules:
    - ``segments``: the `Segment` value object and `SegmentKind`.
    - ``matcher``: closing-quote search with nested delimiter tracking.
    - ``classifier``: the "is this a type literal?" heuristic.
    - ``segmenter``: drives matcher and classifier over a whole message.

Nothing in this package suspends or touches processes.
"""

from __future__ import annotations

from tserrors.parser.classifier import is_pure_type_literal
from tserrors.parser.matcher import find_closing_quote
from tserrors.parser.segmenter import segment
from tserrors.parser.segments import Segment, SegmentKind

__all__: list[str] = [
    "Segment",
    "SegmentKind",
    "find_closing_quote",
    "is_pure_type_literal",
    "segment",
]
