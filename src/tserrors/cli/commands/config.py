# topmark:header:start
#
#   project      : TSErrors
#   file         : config.py
#   file_relpath : src/tserrors/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors `config` command group.

Subcommands for inspecting and scaffolding configuration:

  * ``tserrors config dump``: show the effective merged configuration.
  * ``tserrors config defaults``: show the built-in default configuration.
  * ``tserrors config init``: print the annotated starter configuration file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tserrors.cli.config_resolver import resolve_config_from_click
from tserrors.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatter_options,
    get_effective_verbosity,
)
from tserrors.config.io import load_default_config_template_toml_text, load_defaults_dict, to_toml
from tserrors.config.logging import get_logger

if TYPE_CHECKING:
    from tserrors.cli.console_api import ConsoleLike
    from tserrors.config import Config
    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)

BEGIN_MARKER = "# === BEGIN ==="
END_MARKER = "# === END ==="


def _print_toml(console: ConsoleLike, toml_text: str, *, banner: str | None) -> None:
    if banner:
        console.print(console.styled(banner, bold=True, underline=True))
        console.print(console.styled(BEGIN_MARKER, fg="cyan", dim=True))
    console.print(console.styled(toml_text.rstrip("\n"), fg="cyan"))
    if banner:
        console.print(console.styled(END_MARKER, fg="cyan", dim=True))


@click.group(
    name="config",
    help="Inspect and scaffold TSErrors configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Dump the effective configuration (defaults, config files, CLI overrides) as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_formatter_options
@common_config_options
def config_dump_command(
    *,
    formatter_cmd: str | None,
    print_width: int | None,
    timeout_ms: int | None,
    sync_format: bool | None,
    no_cache: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Print the merged configuration between BEGIN/END markers."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        formatter_cmd=formatter_cmd,
        print_width=print_width,
        timeout_ms=timeout_ms,
        sync_format=sync_format,
        no_cache=no_cache,
    )

    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(console.styled(f"# from: {source}", dim=True))
    for issue in config.issues:
        console.warn(f"[config] {issue}")

    console.print(BEGIN_MARKER)
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
    console.print(END_MARKER)


@config_command.command(
    name="defaults",
    help="Display the built-in default configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
def config_defaults_command() -> None:
    """Print the runtime defaults."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    banner: str | None = (
        "Default TSErrors Configuration (TOML):" if get_effective_verbosity(ctx) > 0 else None
    )
    _print_toml(console, to_toml(load_defaults_dict()), banner=banner)


@config_command.command(
    name="init",
    help="Print an annotated starter configuration file (save it as tserrors.toml).",
    context_settings=CONTEXT_SETTINGS,
)
def config_init_command() -> None:
    """Print the packaged annotated template."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    toml_text, err = load_default_config_template_toml_text()
    if err is not None:
        console.warn(f"Packaged template unavailable ({err}); printing generated defaults.")

    banner: str | None = (
        "Initial TSErrors Configuration (TOML):" if get_effective_verbosity(ctx) > 0 else None
    )
    _print_toml(console, toml_text, banner=banner)
