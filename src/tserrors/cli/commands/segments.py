# topmark:header:start
#
#   project      : TSErrors
#   file         : segments.py
#   file_relpath : src/tserrors/cli/commands/segments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors `segments` command.

Prints how a message is split into text and code segments (no formatting).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tserrors.cli.cli_types import OutputFormat
from tserrors.cli.io import read_records
from tserrors.cli.options import CONTEXT_SETTINGS, common_input_options, output_format_option
from tserrors.parser.segmenter import segment

if TYPE_CHECKING:
    from tserrors.cli.console_api import ConsoleLike
    from tserrors.core.diagnostics import DiagnosticRecord
    from tserrors.parser.segments import Segment


@click.command(
    name="segments",
    help="Show the text/code segments of a diagnostic message.",
    context_settings=CONTEXT_SETTINGS,
)
@common_input_options
@output_format_option
def segments_command(
    *,
    messages: tuple[str, ...],
    json_input: bool,
    output_format: OutputFormat | None,
) -> None:
    """Print the segments of each message."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    records: list[DiagnosticRecord] = read_records(messages, json_input=json_input)
    parsed: list[list[Segment]] = [segment(r.message) for r in records]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        payload = [
            {"message": r.message, "segments": [s.to_dict() for s in segs]}
            for r, segs in zip(records, parsed)
        ]
        console.print(json.dumps(payload, indent=2))
        return

    for i, segs in enumerate(parsed):
        if i:
            console.print()
        for seg in segs:
            if fmt == OutputFormat.MARKDOWN:
                label = f"**{seg.kind.value}**" + (f" ({seg.lang})" if seg.lang else "")
                console.print(f"- {label}: `{seg.content}`")
            else:
                label = seg.kind.value + (f"[{seg.lang}]" if seg.lang else "")
                console.print(f"{console.styled(label, fg='cyan')}\t{seg.content!r}")
