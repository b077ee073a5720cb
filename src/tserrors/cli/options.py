# topmark:header:start
#
#   project      : TSErrors
#   file         : options.py
#   file_relpath : src/tserrors/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Centralizes reusable options (verbosity, color, config files, formatter
overrides) so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from tserrors.cli.cli_types import EnumChoiceParam, OutputFormat
from tserrors.cli.errors import TsErrorsUsageError
from tserrors.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from tserrors.config.logging import TsErrorsLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: TsErrorsLogger = get_logger(__name__)

#: Click context settings shared by commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, else the number of ``-v`` flags.

    Raises:
        TsErrorsUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TsErrorsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (0 if unset)."""
    obj: Any = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (show formatter errors, banners).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON output.
        Honors ``--color`` / ``--no-color``.
        Honors ``FORCE_COLOR`` and ``NO_COLOR`` environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format is OutputFormat.JSON:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(dir_okay=False),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_formatter_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the ``[formatter]`` and ``[cache]`` settings."""
    f = click.option(
        "--formatter-cmd",
        "formatter_cmd",
        default=None,
        metavar="EXE",
        help="Formatter executable (skips auto-detection of prettier/prettierd).",
    )(f)
    f = click.option(
        "--print-width",
        "print_width",
        type=click.IntRange(min=1),
        default=None,
        help="Line width requested from the formatter.",
    )(f)
    f = click.option(
        "--timeout-ms",
        "timeout_ms",
        type=click.IntRange(min=1),
        default=None,
        help="Formatter deadline in milliseconds.",
    )(f)
    f = click.option(
        "--sync/--async",
        "sync_format",
        default=None,
        help="Run the formatter blocking (sync) or through the event loop (async).",
    )(f)
    f = click.option(
        "--no-cache",
        "no_cache",
        is_flag=True,
        help="Disable the format cache.",
    )(f)
    return f


def common_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``MESSAGE...`` argument and ``--json`` input flag."""
    f = click.argument("messages", nargs=-1, metavar="[MESSAGE]...")(f)
    f = click.option(
        "--json",
        "json_input",
        is_flag=True,
        help="Input is LSP-style diagnostic JSON (an object or a list of objects).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` (default, markdown, json)."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
