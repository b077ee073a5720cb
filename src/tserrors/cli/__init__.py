# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for TSErrors.

Entry point: `tserrors.cli.main.cli`. Program output goes through a console
object stored in ``ctx.obj["console"]``; internal diagnostics go through
`logging` (see `tserrors.config.logging`).
"""

from __future__ import annotations
