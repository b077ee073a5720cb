# topmark:header:start
#
#   project      : TSErrors
#   file         : job.py
#   file_relpath : src/tserrors/formatter/job.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting jobs with single-shot completion.

A job is created for one asynchronous formatting request. Process exit,
start failure and timeout all race to complete it; the first call to
`FormattingJob.complete` wins and fires the callback, every later call is
discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import TYPE_CHECKING

from tserrors.config.logging import get_logger

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable, Sequence

    from tserrors.config.logging import TsErrorsLogger
    from tserrors.core.errors import FormatError

    FormatCallback = Callable[[str, str | None], None]

logger: TsErrorsLogger = get_logger(__name__)


@dataclass(frozen=True)
class FormatOutcome:
    """Result of one formatting request.

    Attributes:
        text (str): Formatted text, or the original content on failure.
        error (str | None): ``None`` on success, else a readable message.
    """

    text: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when formatting succeeded."""
        return self.error is None


class FormattingJob:
    """One in-flight asynchronous formatting request.

    Args:
        content (str): Raw code segment content.
        callback (FormatCallback): Called once with ``(text, error)``.
        wrapped (str): Sanitized, wrapped text sent to the process.
        argv (Sequence[str]): Formatter command line.
        deadline (float | None): Event-loop time after which the job times out.
    """

    def __init__(
        self,
        content: str,
        callback: FormatCallback,
        *,
        wrapped: str = "",
        argv: Sequence[str] = (),
        deadline: float | None = None,
    ) -> None:
        self.content: str = content
        self.wrapped: str = wrapped
        self.argv: tuple[str, ...] = tuple(argv)
        self.deadline: float | None = deadline
        self._callback: FormatCallback = callback
        self._lock = Lock()
        self._done: bool = False
        self._outcome: FormatOutcome | None = None
        self._task: asyncio.Task[None] | None = None
        self._timer: asyncio.TimerHandle | None = None

    @property
    def done(self) -> bool:
        """Whether the job has been completed."""
        return self._done

    @property
    def outcome(self) -> FormatOutcome | None:
        """The delivered outcome, or ``None`` while pending."""
        return self._outcome

    @property
    def task(self) -> asyncio.Task[None] | None:
        """Task running the formatter process, if one was started."""
        return self._task

    def attach(
        self,
        *,
        task: asyncio.Task[None] | None = None,
        timer: asyncio.TimerHandle | None = None,
    ) -> None:
        """Attach the process task and the timeout handle."""
        if task is not None:
            self._task = task
        if timer is not None:
            self._timer = timer

    def complete(self, text: str, error: FormatError | str | None = None) -> bool:
        """Deliver the outcome unless the job is already complete.

        Cancels the pending timeout and invokes the callback. Exceptions raised
        by the callback propagate to the caller (on the event loop, to the
        loop's exception handler).

        Args:
            text (str): Result text (original content on failure).
            error (FormatError | str | None): Failure, if any.

        Returns:
            bool: True if this call completed the job, False if it was discarded.
        """
        with self._lock:
            if self._done:
                logger.trace("Discarding late completion for job %r", self.content[:40])
                return False
            self._done = True
        self._outcome = FormatOutcome(text=text, error=None if error is None else str(error))
        if self._timer is not None:
            self._timer.cancel()
        self._callback(self._outcome.text, self._outcome.error)
        return True
