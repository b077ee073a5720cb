# topmark:header:start
#
#   project      : TSErrors
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in `tserrors.config.io`."""

from __future__ import annotations

from typing import Any

import tomlkit

import tserrors.config.io as config_io

from tserrors.config.io import (
    get_int_value_or_none_checked,
    load_default_config_template_toml_text,
    load_defaults_dict,
    to_toml,
)


def test_to_toml_strips_none() -> None:
    """``None`` values have no TOML form and are dropped."""
    text: str = to_toml({"formatter": {"cmd": None, "print_width": 60, "args": ["a", None]}})
    parsed: Any = tomlkit.parse(text).unwrap()
    assert parsed == {"formatter": {"print_width": 60, "args": ["a"]}}


def test_template_matches_runtime_defaults() -> None:
    """The packaged annotated template parses to the runtime defaults."""
    text, err = load_default_config_template_toml_text()
    assert err is None
    assert "topmark:header" not in text
    assert "# TSErrors configuration" in text
    assert tomlkit.parse(text).unwrap() == load_defaults_dict()


def test_defaults_dict_is_fresh() -> None:
    """Callers may mutate the returned dict without affecting later calls."""
    first: dict[str, Any] = load_defaults_dict()
    first["formatter"]["print_width"] = 1
    assert load_defaults_dict()["formatter"]["print_width"] == 60


def test_int_getter_rejects_bool() -> None:
    """``true`` is not accepted where an integer is expected."""
    issues: list[str] = []
    assert get_int_value_or_none_checked({"n": True}, "n", where="[t]", issues=issues) is None
    assert issues == ["Expected int in [t].n, got bool: True"]


def test_public_surface_snapshot() -> None:
    """`tserrors.config.io` exports exactly the helpers the config layer uses."""
    assert sorted(config_io.__all__) == [
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
    assert all(hasattr(config_io, name) for name in config_io.__all__)
