# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across TSErrors.

The ``tserrors.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (parser, formatter, CLI, tests) without
pulling in rendering or process concerns.

Included modules:

- ``diagnostics``
  The input diagnostic record (message plus optional severity, source and
  code metadata) and its `Severity` enum.

- ``errors``
  The formatting error taxonomy. Formatting errors are delivered as values
  alongside the original content; they never abort a message.
"""

from __future__ import annotations
