# topmark:header:start
#
#   project      : TSErrors
#   file         : diagnostics.py
#   file_relpath : src/tserrors/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic records consumed by TSErrors.

A `DiagnosticRecord` is what the collaborating editor / LSP layer hands us:
minimally a message, optionally severity, source and code. Only the message
is used by the segmenter; the rest is metadata for rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast


class Severity(Enum):
    """Diagnostic severity, numbered like LSP ``DiagnosticSeverity``."""

    ERROR = 1
    WARNING = 2
    INFO = 3
    HINT = 4

    @property
    def title(self) -> str:
        """Return the padded display title used for rendered diagnostics."""
        return f" {self.name.capitalize()} "

    @classmethod
    def parse(cls, value: object) -> Severity | None:
        """Parse a severity from an LSP number (1..4) or a name.

        Names are matched case-insensitively; ``"warn"`` and ``"information"``
        are accepted as aliases.

        Args:
            value (object): Raw value (``int``, ``str``, `Severity` or ``None``).

        Returns:
            Severity | None: The severity, or ``None`` when unset or unknown.
        """
        if value is None or isinstance(value, Severity):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            key: str = value.strip().upper()
            if key.isdigit():
                return cls.parse(int(key))
            key = {"WARN": "WARNING", "INFORMATION": "INFO"}.get(key, key)
            member: Any | None = cls.__members__.get(key)
            return cast("Severity | None", member)
        return None


DEFAULT_TITLE: str = " Diagnostic "


@dataclass(frozen=True)
class DiagnosticRecord:
    """A diagnostic message with optional rendering metadata.

    Attributes:
        message (str): Raw diagnostic message text.
        severity (Severity | None): Severity, if known.
        source (str | None): Producer of the diagnostic (e.g. ``"ts"``).
        code (str | int | None): Diagnostic code (e.g. ``2322``).
    """

    message: str
    severity: Severity | None = None
    source: str | None = None
    code: str | int | None = None

    @property
    def title(self) -> str:
        """Return the severity title, or a generic one when severity is unknown."""
        return self.severity.title if self.severity is not None else DEFAULT_TITLE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DiagnosticRecord:
        """Build a record from an LSP-style mapping.

        Recognized keys: ``message``, ``severity``, ``source``, ``code``. Unknown
        keys are ignored.

        Raises:
            ValueError: If ``message`` is missing or not a string.
        """
        message: Any = data.get("message")
        if not isinstance(message, str):
            raise ValueError("diagnostic 'message' must be a string")
        source: Any = data.get("source")
        code: Any = data.get("code")
        return cls(
            message=message,
            severity=Severity.parse(data.get("severity")),
            source=source if isinstance(source, str) else None,
            code=code if isinstance(code, (str, int)) and not isinstance(code, bool) else None,
        )
