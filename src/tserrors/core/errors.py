# topmark:header:start
#
#   project      : TSErrors
#   file         : errors.py
#   file_relpath : src/tserrors/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting error taxonomy.

These errors describe why a code segment could not be pretty-printed. The
formatter client never lets them escape: they are delivered as values together
with the original (unformatted) content. ``str(error)`` is the user-facing
message passed to callbacks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class FormatError(Exception):
    """Base class for all formatting failures."""


class FormatterNotFound(FormatError):
    """No formatter executable could be located."""

    def __init__(self, message: str = "Prettier not found") -> None:
        super().__init__(message)


class FormatterStartFailed(FormatError):
    """The formatter process could not be spawned."""

    def __init__(self, message: str = "Failed to start prettier job") -> None:
        super().__init__(message)


class FormatterTimedOut(FormatError):
    """The formatter did not finish before the deadline and was killed."""

    def __init__(self, message: str = "Prettier timed out") -> None:
        super().__init__(message)


class FormatterProcessFailed(FormatError):
    """The formatter exited non-zero or produced no output.

    Attributes:
        returncode (int): Process exit status.
        argv (tuple[str, ...]): Command that was run.
        stderr (str): Captured error stream.
        stdout (str): Captured output stream.
    """

    def __init__(
        self,
        *,
        returncode: int,
        argv: Sequence[str],
        stderr: str,
        stdout: str,
    ) -> None:
        self.returncode: int = returncode
        self.argv: tuple[str, ...] = tuple(argv)
        self.stderr: str = stderr
        self.stdout: str = stdout
        super().__init__(
            f"Formatting failed (exit={returncode})\n"
            f"cmd: {' '.join(self.argv)}\n"
            f"stderr: {stderr or '(empty)'}\n"
            f"stdout: {stdout or '(empty)'}"
        )
