# topmark:header:start
#
#   project      : TSErrors
#   file         : model.py
#   file_relpath : src/tserrors/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed read-only by the
      segmenter, the formatter client and the renderers.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest → highest precedence):
    1) Built-in defaults (`tserrors.config.io.load_defaults_dict`)
    2) User config (``$XDG_CONFIG_HOME/tserrors/tserrors.toml`` or ``~/.tserrors.toml``)
    3) Project configs discovered upward from the anchor, root-most first;
       within a directory ``pyproject.toml`` (``[tool.tserrors]``) is merged
       before ``tserrors.toml``
    4) Extra config files passed explicitly (``--config``)
    5) CLI / API overrides (`MutableConfig.apply_cli_args`)

Tri-state fields:
    Every `MutableConfig` value field is ``None`` when a layer does not set it,
    so `MutableConfig.merge_with` can apply a plain last-wins rule.
    `MutableConfig.freeze` fills whatever is still unset from the runtime
    defaults and replaces out-of-range values (recording an issue).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tserrors.config.io import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from tserrors.config.keys import Toml
from tserrors.config.logging import get_logger
from tserrors.constants import PYPROJECT_TOML_NAME, TSERRORS_TOML_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tserrors.config.io import TomlTable
    from tserrors.config.logging import TsErrorsLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: TsErrorsLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for TSErrors.

    Produced by `MutableConfig.freeze`. Every operation treats it as read-only
    for its whole duration; use `Config.thaw` → edit → `MutableConfig.freeze`
    for changes.

    Attributes:
        timestamp (str): ISO-formatted timestamp when the Config instance was created.
        config_files (tuple[Path | str, ...]): Paths or identifiers for config sources used.
        formatter_cmd (str | None): Formatter executable override; ``None`` = auto-detect.
        formatter_args (tuple[str, ...]): Arguments passed to regular ``prettier``.
        print_width (int): Line width requested from the formatter.
        timeout_ms (int): Deadline for one formatting process, in milliseconds.
        sync_format (bool): Whether inline formatting blocks on a cache miss.
        search_paths (tuple[Path, ...]): Extra directories searched for a formatter
            before ``PATH``.
        cache_enabled (bool): Whether formatted snippets are cached.
        cache_max_entries (int): Cache size at which the cache is cleared.
        format_on_open (bool): Whether showing a diagnostic schedules async formatting.
        title (str | None): Fixed display title; ``None`` = derive from severity.
        issues (tuple[str, ...]): Problems found while loading or sanitizing config.
    """

    timestamp: str
    config_files: tuple[Path | str, ...]
    formatter_cmd: str | None
    formatter_args: tuple[str, ...]
    print_width: int
    timeout_ms: int
    sync_format: bool
    search_paths: tuple[Path, ...]
    cache_enabled: bool
    cache_max_entries: int
    format_on_open: bool
    title: str | None
    issues: tuple[str, ...]

    @property
    def timeout_seconds(self) -> float:
        """Return the formatter timeout in seconds."""
        return self.timeout_ms / 1000.0

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-compatible dict.

        ``None`` values are kept here and stripped by `tserrors.config.io.to_toml`.

        Returns:
            TomlTable: A mapping suitable for TOML serialization.
        """
        return {
            Toml.SECTION_FORMATTER: {
                Toml.KEY_CMD: self.formatter_cmd,
                Toml.KEY_ARGS: list(self.formatter_args),
                Toml.KEY_PRINT_WIDTH: self.print_width,
                Toml.KEY_TIMEOUT_MS: self.timeout_ms,
                Toml.KEY_SYNC_FORMAT: self.sync_format,
                Toml.KEY_SEARCH_PATHS: [str(p) for p in self.search_paths],
            },
            Toml.SECTION_CACHE: {
                Toml.KEY_ENABLED: self.cache_enabled,
                Toml.KEY_MAX_ENTRIES: self.cache_max_entries,
            },
            Toml.SECTION_DISPLAY: {
                Toml.KEY_FORMAT_ON_OPEN: self.format_on_open,
                Toml.KEY_TITLE: self.title,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            timestamp=self.timestamp,
            config_files=list(self.config_files),
            formatter_cmd=self.formatter_cmd,
            formatter_args=list(self.formatter_args),
            print_width=self.print_width,
            timeout_ms=self.timeout_ms,
            sync_format=self.sync_format,
            search_paths=list(self.search_paths),
            cache_enabled=self.cache_enabled,
            cache_max_entries=self.cache_max_entries,
            format_on_open=self.format_on_open,
            title=self.title,
            issues=list(self.issues),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Collects config from defaults, user/project files, extra files and CLI
    overrides, then produces an immutable `Config` via `freeze`. TOML I/O is
    delegated to `tserrors.config.io`.
    """

    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # [formatter]
    formatter_cmd: str | None = None
    formatter_args: list[str] | None = None
    print_width: int | None = None
    timeout_ms: int | None = None
    sync_format: bool | None = None
    search_paths: list[Path] | None = None

    # [cache]
    cache_enabled: bool | None = None
    cache_max_entries: int | None = None

    # [display]
    format_on_open: bool | None = None
    title: str | None = None

    # Problems recorded while loading / merging / sanitizing.
    issues: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Unset fields are filled from the runtime defaults; out-of-range numbers
        are replaced by their default and recorded in ``issues``.

        Returns:
            Config: The immutable runtime snapshot.
        """
        defaults: MutableConfig = MutableConfig.from_defaults()
        issues: list[str] = list(self.issues)

        def _positive(name: str, value: int | None, fallback: int | None, allow_zero: bool) -> int:
            assert fallback is not None
            if value is None:
                return fallback
            if value > 0 or (allow_zero and value == 0):
                return value
            message: str = f"Invalid {name}={value}; using default {fallback}"
            logger.warning("%s", message)
            issues.append(message)
            return fallback

        print_width: int = _positive(
            Toml.KEY_PRINT_WIDTH, self.print_width, defaults.print_width, False
        )
        timeout_ms: int = _positive(Toml.KEY_TIMEOUT_MS, self.timeout_ms, defaults.timeout_ms, False)
        max_entries: int = _positive(
            Toml.KEY_MAX_ENTRIES, self.cache_max_entries, defaults.cache_max_entries, True
        )

        def _pick(value: Any, fallback: Any) -> Any:
            return fallback if value is None else value

        return Config(
            timestamp=self.timestamp,
            config_files=tuple(self.config_files),
            formatter_cmd=self.formatter_cmd or None,
            formatter_args=tuple(_pick(self.formatter_args, defaults.formatter_args)),
            print_width=print_width,
            timeout_ms=timeout_ms,
            sync_format=bool(_pick(self.sync_format, defaults.sync_format)),
            search_paths=tuple(_pick(self.search_paths, defaults.search_paths)),
            cache_enabled=bool(_pick(self.cache_enabled, defaults.cache_enabled)),
            cache_max_entries=max_entries,
            format_on_open=bool(_pick(self.format_on_open, defaults.format_on_open)),
            title=self.title or None,
            issues=tuple(issues),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults.

        Returns:
            MutableConfig: A `MutableConfig` instance populated with default values.
        """
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``tserrors.toml`` and ``pyproject.toml``; for the latter only
        the ``[tool.tserrors]`` section is read.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if successful; None if the
                ``[tool.tserrors]`` section is missing from a ``pyproject.toml``.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(get_table_value(toml_data, "tool"), "tserrors")
            if not tool_section:
                logger.debug("[tool.tserrors] section missing in %s", path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.trace("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Directory entries in ``[formatter].search_paths`` are expanded (``~``) and
        resolved against the *config file's* directory.

        Args:
            data (TomlTable): The parsed TOML data as a dictionary.
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting draft; keys absent from ``data`` stay ``None``.
        """
        issues: list[str] = []

        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                issues.append(f"Unknown top-level key '{key}' in {config_file or '<defaults>'}")

        formatter_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMATTER)
        logger.trace("TOML [formatter]: %s", formatter_tbl)
        cache_tbl: TomlTable = get_table_value(data, Toml.SECTION_CACHE)
        logger.trace("TOML [cache]: %s", cache_tbl)
        display_tbl: TomlTable = get_table_value(data, Toml.SECTION_DISPLAY)
        logger.trace("TOML [display]: %s", display_tbl)

        for section, tbl in (
            (Toml.SECTION_FORMATTER, formatter_tbl),
            (Toml.SECTION_CACHE, cache_tbl),
            (Toml.SECTION_DISPLAY, display_tbl),
        ):
            for key in tbl:
                if key not in Toml.ALLOWED_SECTION_KEYS[section]:
                    issues.append(f"Unknown key '{key}' in [{section}]")

        for message in issues:
            logger.warning("%s", message)

        where_fmt = f"[{Toml.SECTION_FORMATTER}]"
        where_cache = f"[{Toml.SECTION_CACHE}]"
        where_display = f"[{Toml.SECTION_DISPLAY}]"

        draft: MutableConfig = cls()
        draft.config_files = [config_file] if config_file else []

        draft.formatter_cmd = get_string_value_or_none_checked(
            formatter_tbl, Toml.KEY_CMD, where=where_fmt, issues=issues
        )
        draft.formatter_args = get_string_list_value_or_none_checked(
            formatter_tbl, Toml.KEY_ARGS, where=where_fmt, issues=issues
        )
        draft.print_width = get_int_value_or_none_checked(
            formatter_tbl, Toml.KEY_PRINT_WIDTH, where=where_fmt, issues=issues
        )
        draft.timeout_ms = get_int_value_or_none_checked(
            formatter_tbl, Toml.KEY_TIMEOUT_MS, where=where_fmt, issues=issues
        )
        draft.sync_format = get_bool_value_or_none_checked(
            formatter_tbl, Toml.KEY_SYNC_FORMAT, where=where_fmt, issues=issues
        )
        raw_paths: list[str] | None = get_string_list_value_or_none_checked(
            formatter_tbl, Toml.KEY_SEARCH_PATHS, where=where_fmt, issues=issues
        )
        if raw_paths is not None:
            base: Path = config_file.parent.resolve() if config_file else Path.cwd()
            draft.search_paths = [abs_path_from(base, p) for p in raw_paths]

        draft.cache_enabled = get_bool_value_or_none_checked(
            cache_tbl, Toml.KEY_ENABLED, where=where_cache, issues=issues
        )
        draft.cache_max_entries = get_int_value_or_none_checked(
            cache_tbl, Toml.KEY_MAX_ENTRIES, where=where_cache, issues=issues
        )

        draft.format_on_open = get_bool_value_or_none_checked(
            display_tbl, Toml.KEY_FORMAT_ON_OPEN, where=where_display, issues=issues
        )
        draft.title = get_string_value_or_none_checked(
            display_tbl, Toml.KEY_TITLE, where=where_display, issues=issues
        )

        draft.issues = issues
        return draft

    # ------------------------------ Discovery ------------------------------
    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned **root-most → nearest**; within one directory
        ``pyproject.toml`` comes before ``tserrors.toml`` so the tool file wins on
        merge. A config setting ``root = true`` stops the walk after its directory.

        Args:
            start (Path): The directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, TSERRORS_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                data: TomlTable = load_toml_dict(p)
                if name == PYPROJECT_TOML_NAME:
                    data = get_table_value(get_table_value(data, "tool"), "tserrors")
                    if not data:
                        continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if data.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):  # root-most first
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return a user-scoped config path if it exists.

        Looks under XDG config (``$XDG_CONFIG_HOME/tserrors/tserrors.toml``) and a
        legacy fallback (``~/.tserrors.toml``). The first existing path is returned.
        """
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        for p in (base / "tserrors" / TSERRORS_TOML_NAME, Path.home() / ".tserrors.toml"):
            if p.is_file():
                return p
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory where upward discovery starts (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                **after** discovery, in the given order.
            no_config (bool): If True, skip user and project discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg: MutableConfig | None = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)

            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose set values win.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def _last(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            timestamp=self.timestamp,
            config_files=self.config_files + other.config_files,
            formatter_cmd=_last(self.formatter_cmd, other.formatter_cmd),
            formatter_args=_last(self.formatter_args, other.formatter_args),
            print_width=_last(self.print_width, other.print_width),
            timeout_ms=_last(self.timeout_ms, other.timeout_ms),
            sync_format=_last(self.sync_format, other.sync_format),
            search_paths=_last(self.search_paths, other.search_paths),
            cache_enabled=_last(self.cache_enabled, other.cache_enabled),
            cache_max_entries=_last(self.cache_max_entries, other.cache_max_entries),
            format_on_open=_last(self.format_on_open, other.format_on_open),
            title=_last(self.title, other.title),
            issues=self.issues + other.issues,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-``None`` value override the draft. Flags that
        influence discovery (``--no-config``, ``--config``) are handled by
        `load_merged`, not here.

        Args:
            args (ArgsLike): Parsed arguments mapping (from CLI or API).

        Returns:
            MutableConfig: This instance, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)

        overrides: dict[str, Any] = {
            k: v
            for k, v in args.items()
            if v is not None
            and k
            in {
                "formatter_cmd",
                "print_width",
                "timeout_ms",
                "sync_format",
                "cache_enabled",
                "cache_max_entries",
                "format_on_open",
                "title",
            }
        }
        if overrides:
            self.config_files.append(CLI_OVERRIDE_STR)
        for key, value in overrides.items():
            setattr(self, key, value)
        return self


def abs_path_from(base: Path, raw: str | os.PathLike[str]) -> Path:
    """Return an absolute Path for *raw* (``~`` expanded), using *base* if relative."""
    p = Path(os.path.expanduser(str(raw)))
    return (base / p).resolve() if not p.is_absolute() else p.resolve()
