# topmark:header:start
#
#   project      : TSErrors
#   file         : loaders.py
#   file_relpath : src/tserrors/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading TSErrors configuration from:
- the packaged default TOML template, and
- on-disk TOML files (``tserrors.toml`` / ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tserrors.config.io.render import to_toml
from tserrors.config.keys import Toml
from tserrors.config.logging import get_logger
from tserrors.constants import (
    DEFAULT_CODE_LANG,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    TOPMARK_END_MARKER,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tserrors.config.logging import TsErrorsLogger

    from .types import TomlTable

logger: TsErrorsLogger = get_logger(__name__)


def load_default_config_template_toml_text() -> tuple[str, Exception | None]:
    """Load the bundled default TOML config *template* as text.

    Unlike `load_defaults_dict`, this preserves the template's comments and
    formatting. If the packaged template cannot be read, a document generated
    from the runtime defaults is returned instead, together with the exception
    raised while reading the template.

    Returns:
        tuple[str, Exception | None]: ``(toml_text, error)``; callers may surface
        ``error`` as a user-facing warning.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    err: Exception | None = None

    try:
        toml_text: str = resource.read_text(encoding="utf8")
        # Drop the file header block so output starts at the template content.
        lines: list[str] = toml_text.splitlines(keepends=True)
        for i, line in enumerate(lines):
            if line.strip() == f"# {TOPMARK_END_MARKER}":
                toml_text = "".join(lines[i + 1 :]).lstrip("\n")
                break
    except OSError as exc:
        err = exc
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        notice: str = (
            f"# NOTE: The packaged template '{DEFAULT_TOML_CONFIG_NAME}' could not be read.\n"
            f"# Reason: {exc}\n"
            "# The content below was generated from TSErrors runtime defaults.\n\n"
        )
        toml_text = f"{notice}{to_toml(load_defaults_dict())}"

    return toml_text, err


def load_defaults_dict() -> TomlTable:
    """Return TSErrors' **runtime defaults** as a Python dict.

    This function performs **no I/O**; runtime defaults live in code so the
    tool keeps working even if the packaged template is missing.

    Returns:
        TomlTable: A new dict containing the runtime defaults; callers may mutate it.
    """
    # Sections/keys align with `tserrors.config.keys.Toml`.
    return {
        Toml.SECTION_FORMATTER: {
            # `cmd` is unset by default: the formatter is auto-detected.
            Toml.KEY_ARGS: ["--parser", DEFAULT_CODE_LANG],
            Toml.KEY_PRINT_WIDTH: 60,
            Toml.KEY_TIMEOUT_MS: 3000,
            Toml.KEY_SYNC_FORMAT: True,
            Toml.KEY_SEARCH_PATHS: [],
        },
        Toml.SECTION_CACHE: {
            Toml.KEY_ENABLED: True,
            Toml.KEY_MAX_ENTRIES: 100,
        },
        Toml.SECTION_DISPLAY: {
            Toml.KEY_FORMAT_ON_OPEN: True,
            # `title` is unset by default: the severity title is used.
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``tserrors.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
