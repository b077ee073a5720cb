# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for TSErrors configuration.

This package centralizes **pure** helpers for reading, validating, and writing
TOML used by the configuration layer, keeping `tserrors.config.model` small
and free of import cycles.

TOML parsing/formatting:
    TSErrors uses `tomlkit` for both parsing and rendering.

    - `load_toml_dict()` parses on-disk TOML and returns plain dicts.
    - `to_toml()` renders a dict (after stripping `None` values).

Typical flow:
    1. Load runtime defaults (``load_defaults_dict``).
    2. Load user/project TOML files (``load_toml_dict``).
    3. Read values with the checked getters.
    4. Serialize back to TOML when dumping the effective config (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
)
from .guards import get_table_value, is_any_list, is_toml_table
from .loaders import (
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
)
from .render import to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "get_bool_value_or_none_checked",
    "get_int_value_or_none_checked",
    "get_string_list_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_any_list",
    "is_toml_table",
    "load_default_config_template_toml_text",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
