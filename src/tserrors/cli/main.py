# topmark:header:start
#
#   project      : TSErrors
#   file         : main.py
#   file_relpath : src/tserrors/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``tserrors`` command.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tserrors.cli.commands.config import config_command
from tserrors.cli.commands.inline import inline_command
from tserrors.cli.commands.segments import segments_command
from tserrors.cli.commands.show import show_command
from tserrors.cli.commands.version import version_command
from tserrors.cli.console import ClickConsole
from tserrors.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tserrors.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tserrors.cli.console_api import ConsoleLike
    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TSErrors: readable TypeScript diagnostics with pretty-printed types.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TSErrors CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tserrors show MESSAGE' to render a diagnostic.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_command)

cli.add_command(segments_command)

cli.add_command(inline_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
