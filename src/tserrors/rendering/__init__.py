# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn segment lists into display text.

- ``markdown``: Markdown lines with fenced code blocks, plus the diagnostic
  header (code, source) and title.
- ``inline``: a single-line message with code segments quoted.
"""

from __future__ import annotations

from tserrors.rendering.inline import format_inline
from tserrors.rendering.markdown import RenderedDiagnostic, render_diagnostic, to_markdown

__all__: list[str] = [
    "RenderedDiagnostic",
    "format_inline",
    "render_diagnostic",
    "to_markdown",
]
