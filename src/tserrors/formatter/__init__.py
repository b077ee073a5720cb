# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/formatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting pipeline for code segments.

Modules:
    - ``cache``: bounded, content-addressed cache of formatted snippets.
    - ``wrapping``: ellipsis sanitizing and synthetic type-alias wrapping.
    - ``process``: the process-running capability and its subprocess backend.
    - ``locator``: where to find ``prettier`` / ``prettierd``.
    - ``job``: single-shot completion for async requests.
    - ``client``: `FormatterClient`, tying the above together.
"""

from __future__ import annotations

from tserrors.formatter.cache import FormatCache, cache_key
from tserrors.formatter.client import FormatterClient
from tserrors.formatter.job import FormatOutcome, FormattingJob
from tserrors.formatter.locator import FormatterCommand, FormatterLocator, mason_bin_dir
from tserrors.formatter.process import ProcessResult, ProcessRunner, SubprocessRunner
from tserrors.formatter.wrapping import sanitize, unwrap, wrap

__all__: list[str] = [
    "FormatCache",
    "FormatOutcome",
    "FormatterClient",
    "FormatterCommand",
    "FormatterLocator",
    "FormattingJob",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "cache_key",
    "mason_bin_dir",
    "sanitize",
    "unwrap",
    "wrap",
]
