# topmark:header:start
#
#   project      : TSErrors
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TSErrors logging helpers."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import parametrize
from tserrors.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    TsErrorsLogger,
    get_logger,
    resolve_env_log_level,
)


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Level names (case-insensitive) and numbers are accepted."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_unset_env_gives_none() -> None:
    """Without the variable no level is forced."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers are `TsErrorsLogger` instances with a working ``trace``."""
    log: TsErrorsLogger = get_logger("tserrors.tests.trace")
    assert isinstance(log, TsErrorsLogger)
    with caplog.at_level(TRACE_LEVEL, logger="tserrors.tests.trace"):
        log.trace("segment %d", 3)
    assert [r.getMessage() for r in caplog.records] == ["segment 3"]
    assert caplog.records[0].levelname == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    """Coloring wraps, but never drops, the formatted message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ChalkFormatter("%(message)s").format(record)
