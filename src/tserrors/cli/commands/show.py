# topmark:header:start
#
#   project      : TSErrors
#   file         : show.py
#   file_relpath : src/tserrors/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors `show` command.

Renders diagnostics as Markdown with type literals pretty-printed by the
external formatter. Formatting failures never fail the command: the affected
types are shown unformatted, and the errors are reported with ``-v`` (or in
the ``errors`` field of JSON output).
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from tserrors.cli.cli_types import OutputFormat
from tserrors.cli.config_resolver import resolve_config_from_click
from tserrors.cli.io import read_records
from tserrors.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatter_options,
    common_input_options,
    get_effective_verbosity,
    output_format_option,
)
from tserrors.config.logging import get_logger
from tserrors.context import TsErrorsContext
from tserrors.core.diagnostics import Severity
from tserrors.parser.segmenter import segment
from tserrors.rendering.markdown import render_diagnostic
from tserrors.session import DiagnosticSession

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tserrors.cli.console_api import ConsoleLike
    from tserrors.config import Config
    from tserrors.config.logging import TsErrorsLogger
    from tserrors.core.diagnostics import DiagnosticRecord
    from tserrors.formatter.job import FormatOutcome
    from tserrors.parser.segments import Segment
    from tserrors.rendering.markdown import RenderedDiagnostic

logger: TsErrorsLogger = get_logger(__name__)

_SEVERITY_FG: dict[Severity | None, str] = {
    Severity.ERROR: "bright_red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
    Severity.HINT: "cyan",
    None: "magenta",
}


@dataclass(frozen=True)
class ShowResult:
    """One rendered diagnostic with the segments and errors behind it."""

    record: DiagnosticRecord
    view: RenderedDiagnostic
    segments: tuple[Segment, ...]
    errors: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {
            "message": self.record.message,
            "severity": self.record.severity.name.lower() if self.record.severity else None,
            "source": self.record.source,
            "code": self.record.code,
            "title": self.view.title,
            "lines": list(self.view.lines),
            "segments": [s.to_dict() for s in self.segments],
            "errors": list(self.errors),
        }


def render_sync(context: TsErrorsContext, record: DiagnosticRecord) -> ShowResult:
    """Render ``record``, formatting each code segment with a blocking call."""
    segments: list[Segment] = []
    errors: list[str] = []
    for seg in segment(record.message):
        if seg.is_code:
            outcome: FormatOutcome = context.client.format_sync_outcome(seg.content)
            if outcome.error is not None:
                errors.append(outcome.error)
            seg = seg.with_content(outcome.text)
        segments.append(seg)
    view: RenderedDiagnostic = render_diagnostic(record, segments, title=context.config.title)
    return ShowResult(record, view, tuple(segments), tuple(errors))


async def render_async(
    context: TsErrorsContext,
    records: Sequence[DiagnosticRecord],
) -> list[ShowResult]:
    """Render ``records`` one after the other through a `DiagnosticSession`."""
    session = DiagnosticSession(context)
    results: list[ShowResult] = []
    for record in records:
        view: RenderedDiagnostic | None = await session.show_and_wait(record)
        if view is None:
            results.append(render_plain(context, record))
            continue
        results.append(ShowResult(record, view, tuple(session.segments), tuple(session.errors)))
    session.close()
    return results


def render_plain(context: TsErrorsContext, record: DiagnosticRecord) -> ShowResult:
    """Render ``record`` without running the formatter."""
    segments: list[Segment] = segment(record.message)
    view: RenderedDiagnostic = render_diagnostic(record, segments, title=context.config.title)
    return ShowResult(record, view, tuple(segments), ())


@click.command(
    name="show",
    help=(
        "Render TypeScript diagnostics with pretty-printed types. "
        "MESSAGE words are joined with spaces; use '-' (or pipe input) to read from STDIN."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_input_options
@click.option(
    "--severity",
    default=None,
    help="Severity of a plain MESSAGE (error, warning, info, hint or 1..4).",
)
@click.option("--source", default=None, help="Source of a plain MESSAGE (e.g. 'ts').")
@click.option("--code", default=None, help="Code of a plain MESSAGE (e.g. 2322).")
@click.option("--title", default=None, help="Fixed title instead of the severity title.")
@output_format_option
@click.option("--no-format", "no_format", is_flag=True, help="Do not run the formatter.")
@common_formatter_options
@common_config_options
def show_command(
    *,
    messages: tuple[str, ...],
    json_input: bool,
    severity: str | None,
    source: str | None,
    code: str | None,
    title: str | None,
    output_format: OutputFormat | None,
    no_format: bool,
    formatter_cmd: str | None,
    print_width: int | None,
    timeout_ms: int | None,
    sync_format: bool | None,
    no_cache: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Render diagnostics with formatted type literals."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        formatter_cmd=formatter_cmd,
        print_width=print_width,
        timeout_ms=timeout_ms,
        sync_format=sync_format,
        no_cache=no_cache,
        title=title,
    )
    records: list[DiagnosticRecord] = read_records(
        messages, json_input=json_input, severity=severity, source=source, code=code
    )
    context: TsErrorsContext = TsErrorsContext.create(config)

    results: list[ShowResult]
    if no_format:
        results = [render_plain(context, r) for r in records]
    elif config.sync_format:
        results = [render_sync(context, r) for r in records]
    else:
        results = asyncio.run(render_async(context, records))

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps([r.to_dict() for r in results], indent=2))
        return

    for i, result in enumerate(results):
        if i:
            console.print()
        if fmt == OutputFormat.MARKDOWN:
            console.print(f"## {result.view.title.strip()}")
            console.print()
            console.print(result.view.text)
        else:
            fg: str = _SEVERITY_FG.get(result.record.severity, "magenta")
            console.print(console.styled(result.view.title, bold=True, reverse=True, fg=fg))
            console.print(result.view.text)
        if vlevel > 0:
            for error in result.errors:
                console.warn(f"[formatter] {error}")
