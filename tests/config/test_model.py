# topmark:header:start
#
#   project      : TSErrors
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, TOML parsing, freezing and layering."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_mutable_config
from tserrors.config import Config, MutableConfig
from tserrors.config.model import CLI_OVERRIDE_STR


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """The runtime defaults match the documented values."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.formatter_cmd is None
    assert cfg.formatter_args == ("--parser", "typescript")
    assert cfg.print_width == 60
    assert cfg.timeout_ms == 3000
    assert cfg.timeout_seconds == 3.0
    assert cfg.sync_format is True
    assert cfg.search_paths == ()
    assert cfg.cache_enabled is True
    assert cfg.cache_max_entries == 100
    assert cfg.format_on_open is True
    assert cfg.title is None
    assert cfg.issues == ()


def test_from_toml_dict_reads_all_sections(tmp_path: Path) -> None:
    """Every documented key is read; search paths resolve against the file."""
    cfg_file: Path = tmp_path / "proj" / "tserrors.toml"
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "formatter": {
                "cmd": "prettierd",
                "args": ["--parser", "babel-ts"],
                "print_width": 100,
                "timeout_ms": 500,
                "sync_format": False,
                "search_paths": ["bin", "/abs"],
            },
            "cache": {"enabled": False, "max_entries": 5},
            "display": {"format_on_open": False, "title": " TS "},
        },
        config_file=cfg_file,
    )
    cfg: Config = draft.freeze()
    assert cfg.formatter_cmd == "prettierd"
    assert cfg.formatter_args == ("--parser", "babel-ts")
    assert cfg.print_width == 100
    assert cfg.timeout_ms == 500
    assert cfg.sync_format is False
    assert cfg.search_paths == ((tmp_path / "proj" / "bin").resolve(), Path("/abs").resolve())
    assert cfg.cache_enabled is False
    assert cfg.cache_max_entries == 5
    assert cfg.format_on_open is False
    assert cfg.title == " TS "
    assert cfg.config_files == (cfg_file,)


def test_unknown_keys_and_bad_types_become_issues() -> None:
    """Schema problems are reported without failing the load."""
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "bogus": 1,
            "formatter": {"print_width": "wide", "nope": True, "args": ["--x", 3]},
            "cache": {"enabled": 1},
        }
    )
    cfg: Config = draft.freeze()
    assert cfg.print_width == 60
    assert cfg.formatter_args == ("--x",)
    assert cfg.cache_enabled is True
    joined: str = "\n".join(cfg.issues)
    assert "Unknown top-level key 'bogus'" in joined
    assert "Unknown key 'nope' in [formatter]" in joined
    assert "[formatter].print_width" in joined
    assert "[cache].enabled" in joined
    assert "non-string entry" in joined


@pytest.mark.parametrize(
    "field, value, expected",
    [
        ("print_width", 0, 60),
        ("timeout_ms", -5, 3000),
        ("cache_max_entries", -1, 100),
        ("cache_max_entries", 0, 0),
    ],
)
def test_freeze_sanitizes_numbers(field: str, value: int, expected: int) -> None:
    """Out-of-range numbers fall back to defaults and are recorded as issues."""
    cfg: Config = make_mutable_config(**{field: value}).freeze()
    assert getattr(cfg, field) == expected
    assert bool(cfg.issues) is (value != expected)


def test_empty_cmd_and_title_mean_unset() -> None:
    """Empty strings are normalized to ``None``."""
    cfg: Config = make_mutable_config(formatter_cmd="", title="").freeze()
    assert cfg.formatter_cmd is None
    assert cfg.title is None


def test_merge_with_last_wins() -> None:
    """Set values in the later draft override earlier ones; unset ones do not."""
    base: MutableConfig = MutableConfig.from_defaults()
    overlay = MutableConfig(print_width=80, config_files=[Path("b.toml")])
    merged: Config = base.merge_with(overlay).freeze()
    assert merged.print_width == 80
    assert merged.timeout_ms == 3000
    assert merged.config_files == (Path("b.toml"),)


def test_thaw_freeze_roundtrip() -> None:
    """`Config.thaw` produces a builder that freezes back to an equal config."""
    cfg: Config = make_mutable_config(print_width=77, search_paths=[Path("/x")]).freeze()
    assert cfg.thaw().freeze() == cfg


def test_apply_cli_args_overrides_and_marks_source() -> None:
    """Only non-None CLI values apply; a marker is added to the source list."""
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_cli_args({"print_width": 99, "timeout_ms": None, "unrelated": 1})
    cfg: Config = draft.freeze()
    assert cfg.print_width == 99
    assert cfg.timeout_ms == 3000
    assert cfg.config_files == (CLI_OVERRIDE_STR,)

    untouched: MutableConfig = MutableConfig.from_defaults().apply_cli_args({"title": None})
    assert untouched.config_files == []


def test_to_toml_dict_shape() -> None:
    """The TOML view mirrors the file layout."""
    data = MutableConfig.from_defaults().freeze().to_toml_dict()
    assert set(data) == {"formatter", "cache", "display"}
    assert data["formatter"]["print_width"] == 60
    assert data["formatter"]["cmd"] is None
    assert data["cache"] == {"enabled": True, "max_entries": 100}


def test_from_toml_file_pyproject_tool_section(tmp_path: Path) -> None:
    """Only ``[tool.tserrors]`` is read from ``pyproject.toml``."""
    pyproject: Path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.tserrors.formatter]\nprint_width = 42\n',
    )
    draft: MutableConfig | None = MutableConfig.from_toml_file(pyproject)
    assert draft is not None
    assert draft.print_width == 42

    bare: Path = _write(tmp_path / "other" / "pyproject.toml", '[project]\nname = "y"\n')
    assert MutableConfig.from_toml_file(bare) is None


def test_from_toml_file_invalid_toml_is_empty(tmp_path: Path) -> None:
    """A TOML syntax error is logged and yields an empty draft."""
    bad: Path = _write(tmp_path / "tserrors.toml", "[formatter\nprint_width = ")
    draft: MutableConfig | None = MutableConfig.from_toml_file(bad)
    assert draft is not None
    assert draft.print_width is None
