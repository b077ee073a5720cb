# topmark:header:start
#
#   project      : TSErrors
#   file         : inline.py
#   file_relpath : src/tserrors/cli/commands/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors `inline` command.

Prints each diagnostic as a single line with code segments formatted and
quoted (the form used where only one string per diagnostic fits).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tserrors.cli.config_resolver import resolve_config_from_click
from tserrors.cli.io import read_records
from tserrors.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatter_options,
    common_input_options,
)
from tserrors.context import TsErrorsContext
from tserrors.rendering.inline import format_inline

if TYPE_CHECKING:
    from tserrors.cli.console_api import ConsoleLike
    from tserrors.config import Config
    from tserrors.core.diagnostics import DiagnosticRecord


@click.command(
    name="inline",
    help="Print diagnostics as single lines with formatted types.",
    context_settings=CONTEXT_SETTINGS,
)
@common_input_options
@common_formatter_options
@common_config_options
def inline_command(
    *,
    messages: tuple[str, ...],
    json_input: bool,
    formatter_cmd: str | None,
    print_width: int | None,
    timeout_ms: int | None,
    sync_format: bool | None,
    no_cache: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Print one formatted line per diagnostic.

    With ``--async`` there is no event loop to warm the cache in, so code
    segments are printed unformatted.
    """
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
    records: list[DiagnosticRecord] = read_records(messages, json_input=json_input)
    context: TsErrorsContext = TsErrorsContext.create(config)

    for record in records:
        console.print(format_inline(record, context.client))
