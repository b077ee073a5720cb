# topmark:header:start
#
#   project      : TSErrors
#   file         : session.py
#   file_relpath : src/tserrors/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The diagnostic currently on display.

`DiagnosticSession` renders a diagnostic straight away (types unformatted),
then formats its code segments asynchronously and re-renders as each one
lands. Every completion first checks that its diagnostic is still the one on
display; results for a diagnostic that was closed or replaced are dropped.
The formatter processes themselves are not cancelled.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from tserrors.config.logging import get_logger
from tserrors.formatter.client import event_loop_running
from tserrors.parser.segmenter import segment
from tserrors.rendering.markdown import RenderedDiagnostic, render_diagnostic

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from tserrors.config.logging import TsErrorsLogger
    from tserrors.context import TsErrorsContext
    from tserrors.core.diagnostics import DiagnosticRecord
    from tserrors.parser.segments import Segment

    RenderCallback = Callable[[RenderedDiagnostic], None]
    FormatCallback = Callable[[str, str | None], None]

logger: TsErrorsLogger = get_logger(__name__)


class DiagnosticSession:
    """Show one diagnostic at a time and keep its rendering up to date.

    Args:
        context (TsErrorsContext): Config and formatter client.
        on_render (RenderCallback | None): Called with every (re-)rendering.
    """

    def __init__(
        self,
        context: TsErrorsContext,
        on_render: RenderCallback | None = None,
    ) -> None:
        self._context: TsErrorsContext = context
        self._on_render: RenderCallback | None = on_render
        self._current: DiagnosticRecord | None = None
        self._segments: list[Segment] = []
        self._view: RenderedDiagnostic | None = None
        self._pending: asyncio.Future[list[Segment]] | None = None
        self._errors: list[str] = []

    @property
    def current(self) -> DiagnosticRecord | None:
        """The diagnostic on display, if any."""
        return self._current

    @property
    def is_open(self) -> bool:
        """Whether a diagnostic is on display."""
        return self._current is not None

    @property
    def segments(self) -> list[Segment]:
        """Segments of the current diagnostic, with formatting applied so far."""
        return list(self._segments)

    @property
    def errors(self) -> list[str]:
        """Formatter errors reported for the current diagnostic so far."""
        return list(self._errors)

    @property
    def view(self) -> RenderedDiagnostic | None:
        """The latest rendering."""
        return self._view

    def show(
        self,
        record: DiagnosticRecord,
        *,
        format_code: bool | None = None,
    ) -> RenderedDiagnostic | None:
        """Display ``record`` and, optionally, start formatting its code segments.

        Args:
            record (DiagnosticRecord): Diagnostic to show.
            format_code (bool | None): Start async formatting; defaults to
                ``display.format_on_open``. Ignored without a running event loop.

        Returns:
            RenderedDiagnostic | None: The initial (unformatted) rendering, or
            ``None`` if ``record`` has no message.
        """
        if not record.message:
            return None

        self._current = record
        self._pending = None
        self._errors = []
        segments: list[Segment] = segment(record.message)
        self._segments = list(segments)
        view: RenderedDiagnostic = self._render(record, segments)

        if format_code is None:
            format_code = self._context.config.format_on_open
        if format_code:
            if event_loop_running():
                self._pending = self.format_and_update(segments, record)
            else:
                logger.debug("No running event loop; showing unformatted diagnostic")
        return view

    def format_and_update(
        self,
        segments: Sequence[Segment],
        record: DiagnosticRecord,
    ) -> asyncio.Future[list[Segment]]:
        """Format every code segment of ``record`` and re-render as results land.

        Each job replaces only its own slot (by index), so completion order does
        not matter. Re-rendering happens only while ``record`` is still the
        current diagnostic.

        Args:
            segments (Sequence[Segment]): Segments of ``record.message``.
            record (DiagnosticRecord): Diagnostic the segments belong to.

        Returns:
            asyncio.Future[list[Segment]]: Resolves with the final segments once
            every job has completed.

        Raises:
            RuntimeError: If no event loop is running.
        """
        loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
        slots: list[Segment] = list(segments)
        finished: asyncio.Future[list[Segment]] = loop.create_future()
        code_indices: list[int] = [i for i, seg in enumerate(slots) if seg.is_code]

        if not code_indices:
            finished.set_result(slots)
            return finished

        remaining: int = len(code_indices)

        def _slot_callback(index: int) -> FormatCallback:
            def _on_formatted(text: str, error: str | None) -> None:
                nonlocal remaining
                remaining -= 1
                slots[index] = slots[index].with_content(text)
                try:
                    if error is not None:
                        logger.debug("Segment %d left unformatted: %s", index, error)
                    if self._current is record:
                        if error is not None:
                            self._errors.append(error)
                        self._segments = list(slots)
                        self._render(record, slots)
                    else:
                        logger.debug("Dropping formatting result for a diagnostic no longer shown")
                finally:
                    if remaining == 0 and not finished.done():
                        finished.set_result(list(slots))

            return _on_formatted

        for index in code_indices:
            self._context.client.format_async(slots[index].content, _slot_callback(index), loop=loop)
        return finished

    async def show_and_wait(self, record: DiagnosticRecord) -> RenderedDiagnostic | None:
        """Show ``record`` and wait until all its code segments are formatted."""
        view: RenderedDiagnostic | None = self.show(record, format_code=True)
        if self._pending is not None:
            await self._pending
            return self._view
        return view

    def close(self) -> None:
        """Stop displaying the current diagnostic."""
        self._current = None
        self._segments = []
        self._view = None
        self._pending = None
        self._errors = []

    def toggle(self, record: DiagnosticRecord) -> RenderedDiagnostic | None:
        """Close when open, otherwise show ``record``."""
        if self.is_open:
            self.close()
            return None
        return self.show(record)

    def _render(self, record: DiagnosticRecord, segments: Sequence[Segment]) -> RenderedDiagnostic:
        view: RenderedDiagnostic = render_diagnostic(
            record, segments, title=self._context.config.title
        )
        self._view = view
        if self._on_render is not None:
            self._on_render(view)
        return view
