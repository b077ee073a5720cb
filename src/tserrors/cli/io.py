# topmark:header:start
#
#   project      : TSErrors
#   file         : io.py
#   file_relpath : src/tserrors/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read diagnostic input for CLI commands.

Input comes from positional ``MESSAGE`` arguments (joined with single spaces)
or, when the only argument is ``-`` or no argument is given on a non-TTY
stdin, from STDIN. With ``--json`` the text is parsed as one LSP-style
diagnostic object or a list of them.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from tserrors.cli.errors import TsErrorsDataError, TsErrorsIOError, TsErrorsUsageError
from tserrors.config.logging import get_logger
from tserrors.core.diagnostics import DiagnosticRecord, Severity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_input_text(messages: Sequence[str]) -> str:
    """Return the raw input text from arguments or STDIN.

    Raises:
        TsErrorsUsageError: If no input was given.
        TsErrorsIOError: If STDIN cannot be read.
    """
    stdin = click.get_text_stream("stdin")
    if list(messages) == [STDIN_SENTINEL] or (not messages and not stdin.isatty()):
        try:
            text: str = stdin.read()
        except OSError as exc:
            raise TsErrorsIOError(f"Cannot read diagnostic from STDIN: {exc}") from exc
        # Drop the newline added by `echo` and friends.
        text = text.rstrip("\n")
    else:
        if STDIN_SENTINEL in messages:
            raise TsErrorsUsageError("'-' (read from STDIN) cannot be combined with other messages.")
        text = " ".join(messages)

    if not text.strip():
        raise TsErrorsUsageError("No diagnostic message given (pass MESSAGE or '-' for STDIN).")
    return text


def parse_json_records(text: str) -> list[DiagnosticRecord]:
    """Parse one diagnostic object or a list of them.

    Raises:
        TsErrorsDataError: On invalid JSON or a malformed diagnostic.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TsErrorsDataError(f"Invalid diagnostic JSON: {exc}") from exc

    items: list[Any] = data if isinstance(data, list) else [data]
    records: list[DiagnosticRecord] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise TsErrorsDataError(f"Diagnostic #{i} is not a JSON object")
        try:
            records.append(DiagnosticRecord.from_mapping(item))
        except ValueError as exc:
            raise TsErrorsDataError(f"Diagnostic #{i}: {exc}") from exc
    logger.debug("Parsed %d diagnostic(s) from JSON", len(records))
    return records


def read_records(
    messages: Sequence[str],
    *,
    json_input: bool,
    severity: str | None = None,
    source: str | None = None,
    code: str | None = None,
) -> list[DiagnosticRecord]:
    """Read diagnostics for a command.

    Args:
        messages (Sequence[str]): Positional ``MESSAGE`` arguments.
        json_input (bool): Parse the input as diagnostic JSON.
        severity (str | None): Severity for a plain message (name or 1..4).
        source (str | None): Source for a plain message.
        code (str | None): Code for a plain message.

    Returns:
        list[DiagnosticRecord]: At least one record.
    """
    text: str = read_input_text(messages)
    if json_input:
        records: list[DiagnosticRecord] = parse_json_records(text)
        if not records:
            raise TsErrorsDataError("Diagnostic JSON list is empty")
        return records

    sev: Severity | None = Severity.parse(severity)
    if severity is not None and sev is None:
        raise TsErrorsUsageError(f"Unknown severity '{severity}'")
    return [DiagnosticRecord(message=text, severity=sev, source=source, code=code)]
