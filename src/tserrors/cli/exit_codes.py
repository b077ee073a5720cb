# topmark:header:start
#
#   project      : TSErrors
#   file         : exit_codes.py
#   file_relpath : src/tserrors/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TSErrors CLI.

TSErrors aligns with the BSD `sysexits` convention so other tooling can
interpret failures consistently. Formatting failures are *not* errors: a
diagnostic whose types could not be formatted is still printed, and the
command exits with `ExitCode.SUCCESS`.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TSErrors CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, no
            message). Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed input data (e.g. invalid diagnostic JSON).
            Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: I/O error reading input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
