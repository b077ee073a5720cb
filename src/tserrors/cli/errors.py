# topmark:header:start
#
#   project      : TSErrors
#   file         : errors.py
#   file_relpath : src/tserrors/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TSErrors CLI.

Raise these from commands to exit with a standardized message and exit code.
Errors are printed through the project console when one is present in the
Click context, otherwise with Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tserrors.cli.exit_codes import ExitCode


class TsErrorsError(click.ClickException):
    """Base class for all TSErrors CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class TsErrorsUsageError(TsErrorsError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TsErrorsDataError(TsErrorsError):
    """Error for malformed diagnostic input (e.g. invalid JSON)."""

    exit_code = ExitCode.DATA_ERROR


class TsErrorsIOError(TsErrorsError):
    """Error for I/O failures while reading input."""

    exit_code = ExitCode.IO_ERROR


class TsErrorsConfigError(TsErrorsError):
    """Error for configuration problems."""

    exit_code = ExitCode.CONFIG_ERROR
