# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors package.

TSErrors splits TypeScript compiler diagnostics into text and code segments,
pretty-prints the embedded type literals through an external formatter
(``prettier`` / ``prettierd``), and renders the result as Markdown. It exposes
a small typed API and a click-based CLI.
"""

from __future__ import annotations
