# topmark:header:start
#
#   project      : TSErrors
#   file         : client.py
#   file_relpath : src/tserrors/formatter/client.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External formatter client.

`FormatterClient` pretty-prints type expressions by piping them through
``prettier`` (or ``prettierd``). Every failure degrades to the original content
plus an error message; nothing raises out of `FormatterClient.format_sync` or
`FormatterClient.format_async`.

Shared algorithm:
    1. cache lookup (the async path delivers hits after a short delay);
    2. locate the formatter, else fail with `FormatterNotFound`;
    3. sanitize ellipses and wrap the expression in a type alias;
    4. run the process with the wrapped text on stdin;
    5. on exit 0 with output: unwrap, cache and deliver;
    6. otherwise deliver the original with `FormatterProcessFailed`.

The async path arms a timer for ``timeout_ms``; on expiry the job completes
with `FormatterTimedOut` and the process task is cancelled, which kills the
child. `FormattingJob` guarantees exactly one delivery.
"""

from __future__ import annotations

import asyncio
import subprocess
from typing import TYPE_CHECKING

from tserrors.config.logging import get_logger
from tserrors.constants import CACHE_HIT_DELAY
from tserrors.core.errors import (
    FormatError,
    FormatterNotFound,
    FormatterProcessFailed,
    FormatterStartFailed,
    FormatterTimedOut,
)
from tserrors.formatter.cache import FormatCache
from tserrors.formatter.job import FormatOutcome, FormattingJob
from tserrors.formatter.locator import FormatterLocator
from tserrors.formatter.process import SubprocessRunner
from tserrors.formatter.wrapping import unwrap, wrap

if TYPE_CHECKING:
    from tserrors.config import Config
    from tserrors.config.logging import TsErrorsLogger
    from tserrors.formatter.job import FormatCallback
    from tserrors.formatter.locator import FormatterCommand
    from tserrors.formatter.process import ProcessResult, ProcessRunner

logger: TsErrorsLogger = get_logger(__name__)


def event_loop_running() -> bool:
    """Return whether an asyncio event loop is running in this thread."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class FormatterClient:
    """Format code segments through an external formatter process.

    Args:
        config (Config): Read-only settings (print width, args, timeout).
        cache (FormatCache | None): Shared cache; built from ``config`` if omitted.
        locator (FormatterLocator | None): Executable search; built from ``config``
            if omitted.
        runner (ProcessRunner | None): Process capability; `SubprocessRunner` if
            omitted.
    """

    def __init__(
        self,
        config: Config,
        *,
        cache: FormatCache | None = None,
        locator: FormatterLocator | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        self._config: Config = config
        self._cache: FormatCache = cache if cache is not None else FormatCache.from_config(config)
        self._locator: FormatterLocator = (
            locator if locator is not None else FormatterLocator.from_config(config)
        )
        self._runner: ProcessRunner = runner if runner is not None else SubprocessRunner()

    @property
    def config(self) -> Config:
        """Settings this client was built with."""
        return self._config

    @property
    def cache(self) -> FormatCache:
        """The format cache."""
        return self._cache

    @property
    def locator(self) -> FormatterLocator:
        """The formatter locator."""
        return self._locator

    def build_argv(self, command: FormatterCommand) -> list[str]:
        """Return the command line for ``command`` under the current settings."""
        return command.argv(
            print_width=self._config.print_width,
            args=self._config.formatter_args,
        )

    # ------------------------------ sync ------------------------------

    def format_sync(self, content: str) -> str:
        """Return ``content`` formatted, or unchanged on any failure. Blocks."""
        return self.format_sync_outcome(content).text

    def format_sync_outcome(self, content: str) -> FormatOutcome:
        """Format ``content`` synchronously and report the error, if any.

        The process gets the same ``timeout_ms`` deadline as the async path.

        Args:
            content (str): Raw type expression.

        Returns:
            FormatOutcome: The formatted text, or the original with an error.
        """
        cached: str | None = self._cache.get(content)
        if cached is not None:
            logger.trace("Cache hit (sync)")
            return FormatOutcome(cached)

        command: FormatterCommand | None = self._locator.locate()
        if command is None:
            return self._degrade(content, FormatterNotFound())

        argv: list[str] = self.build_argv(command)
        try:
            result: ProcessResult = self._runner.run(
                argv, wrap(content), timeout=self._config.timeout_seconds
            )
        except subprocess.TimeoutExpired:
            return self._degrade(content, FormatterTimedOut())
        except OSError as exc:
            logger.warning("Cannot start formatter %s: %s", argv[0], exc)
            return self._degrade(content, FormatterStartFailed())

        outcome: FormatOutcome = self._outcome_from_result(content, result)
        if outcome.ok:
            self._cache.set(content, outcome.text)
        return outcome

    # ------------------------------ async -----------------------------

    def format_async(
        self,
        content: str,
        callback: FormatCallback,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> FormattingJob | None:
        """Start formatting ``content`` and return immediately.

        ``callback(text, error)`` is invoked exactly once, on the event loop:
        ``error`` is ``None`` on success, otherwise ``text`` is the original
        content.

        Args:
            content (str): Raw type expression.
            callback (FormatCallback): Receives ``(text, error)``.
            loop (asyncio.AbstractEventLoop | None): Loop to schedule on; defaults
                to the running loop.

        Returns:
            FormattingJob | None: The job for a started process, or ``None`` when
            the outcome was decided without one (cache hit, no formatter).

        Raises:
            RuntimeError: If ``loop`` is omitted and no event loop is running.
        """
        if loop is None:
            loop = asyncio.get_running_loop()

        job = FormattingJob(content, callback)

        cached: str | None = self._cache.get(content)
        if cached is not None:
            logger.trace("Cache hit (async); delivering in %.1fs", CACHE_HIT_DELAY)
            loop.call_later(CACHE_HIT_DELAY, job.complete, cached)
            return None

        command: FormatterCommand | None = self._locator.locate()
        if command is None:
            logger.debug("Formatter not available; delivering original content")
            loop.call_soon(job.complete, content, FormatterNotFound())
            return None

        job.argv = tuple(self.build_argv(command))
        job.wrapped = wrap(content)
        timeout: float = self._config.timeout_seconds
        job.deadline = loop.time() + timeout

        task: asyncio.Task[None] = loop.create_task(self._run_job(job))
        timer: asyncio.TimerHandle = loop.call_later(timeout, self._on_timeout, job)
        job.attach(task=task, timer=timer)
        return job

    async def format(self, content: str) -> FormatOutcome:
        """Awaitable form of `format_async`."""
        loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
        future: asyncio.Future[FormatOutcome] = loop.create_future()

        def _deliver(text: str, error: str | None) -> None:
            if not future.done():
                future.set_result(FormatOutcome(text, error))

        self.format_async(content, _deliver, loop=loop)
        return await future

    async def _run_job(self, job: FormattingJob) -> None:
        try:
            result: ProcessResult = await self._runner.run_async(job.argv, job.wrapped)
        except OSError as exc:
            logger.warning("Cannot start formatter %s: %s", job.argv[0], exc)
            job.complete(job.content, FormatterStartFailed())
            return

        if job.done:
            logger.trace("Formatter finished after the job completed; ignoring result")
            return

        outcome: FormatOutcome = self._outcome_from_result(job.content, result)
        if outcome.ok:
            self._cache.set(job.content, outcome.text)
        job.complete(outcome.text, outcome.error)

    def _on_timeout(self, job: FormattingJob) -> None:
        if job.done:
            return
        logger.debug(
            "Formatter timed out after %d ms: %s", self._config.timeout_ms, " ".join(job.argv)
        )
        # Kill the process before the callback runs; the callback may raise.
        if job.task is not None:
            job.task.cancel()
        job.complete(job.content, FormatterTimedOut())

    # ----------------------------- helpers ----------------------------

    def _outcome_from_result(self, content: str, result: ProcessResult) -> FormatOutcome:
        if result.ok:
            return FormatOutcome(unwrap(result.stdout))
        error = FormatterProcessFailed(
            returncode=result.returncode,
            argv=result.argv,
            stderr=result.stderr.rstrip("\n"),
            stdout=result.stdout.rstrip("\n"),
        )
        logger.warning("%s", error)
        return FormatOutcome(content, str(error))

    def _degrade(self, content: str, error: FormatError) -> FormatOutcome:
        logger.debug("Formatting degraded: %s", error)
        return FormatOutcome(content, str(error))
