# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``tserrors`` CLI."""

from __future__ import annotations
