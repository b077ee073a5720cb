# topmark:header:start
#
#   project      : TSErrors
#   file         : keys.py
#   file_relpath : src/tserrors/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for TSErrors configuration.

This module defines the authoritative string constants used when reading,
writing, and validating TSErrors configuration from TOML sources
(``tserrors.toml`` and ``[tool.tserrors]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI keys are kept separate (see `tserrors.cli.cli_types.ArgsNamespace`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TSErrors configuration.

    The ordering of constants mirrors ``tserrors-default.toml`` to make it easy
    to audit schema changes and keep defaults/docs/parsing aligned.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [formatter]
    SECTION_FORMATTER: Final[str] = "formatter"

    KEY_CMD: Final[str] = "cmd"
    KEY_ARGS: Final[str] = "args"
    KEY_PRINT_WIDTH: Final[str] = "print_width"
    KEY_TIMEOUT_MS: Final[str] = "timeout_ms"
    KEY_SYNC_FORMAT: Final[str] = "sync_format"
    KEY_SEARCH_PATHS: Final[str] = "search_paths"

    # [cache]
    SECTION_CACHE: Final[str] = "cache"

    KEY_ENABLED: Final[str] = "enabled"
    KEY_MAX_ENTRIES: Final[str] = "max_entries"

    # [display]
    SECTION_DISPLAY: Final[str] = "display"

    KEY_FORMAT_ON_OPEN: Final[str] = "format_on_open"
    KEY_TITLE: Final[str] = "title"

    # ---------------------------- Schema helpers ----------------------------

    # Allowed top-level keys under [tool.tserrors] / tserrors.toml.
    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT,
            SECTION_FORMATTER,
            SECTION_CACHE,
            SECTION_DISPLAY,
        }
    )

    # Allowed keys per section.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMATTER: frozenset(
            {
                KEY_CMD,
                KEY_ARGS,
                KEY_PRINT_WIDTH,
                KEY_TIMEOUT_MS,
                KEY_SYNC_FORMAT,
                KEY_SEARCH_PATHS,
            }
        ),
        SECTION_CACHE: frozenset(
            {
                KEY_ENABLED,
                KEY_MAX_ENTRIES,
            }
        ),
        SECTION_DISPLAY: frozenset(
            {
                KEY_FORMAT_ON_OPEN,
                KEY_TITLE,
            }
        ),
    }
