# topmark:header:start
#
#   project      : TSErrors
#   file         : version.py
#   file_relpath : src/tserrors/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors `version` command.

Prints the TSErrors version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tserrors.cli.cli_types import OutputFormat
from tserrors.cli.options import get_effective_verbosity, output_format_option
from tserrors.constants import TSERRORS_VERSION

if TYPE_CHECKING:
    from tserrors.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TSErrors.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TSErrors.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": TSERRORS_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# TSErrors Version\n")
        console.print(f"**TSErrors version: {TSERRORS_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("TSErrors version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TSERRORS_VERSION, bold=True)}")
    else:
        console.print(console.styled(TSERRORS_VERSION, bold=True))
