# topmark:header:start
#
#   project      : TSErrors
#   file         : process.py
#   file_relpath : src/tserrors/formatter/process.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The "run external formatter" capability.

The formatter client only talks to a `ProcessRunner`: give it a command line
and the text for stdin, get back the exit status and both captured streams.
`SubprocessRunner` is the real implementation; tests substitute a fake.
"""

from __future__ import annotations

import asyncio
import contextlib
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tserrors.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one finished process.

    Attributes:
        argv (tuple[str, ...]): Command that was run.
        returncode (int): Exit status.
        stdout (str): Captured output stream (decoded as UTF-8).
        stderr (str): Captured error stream (decoded as UTF-8).
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """True on exit status 0 with non-empty output."""
        return self.returncode == 0 and self.stdout != ""


class ProcessRunner(Protocol):
    """Runs a command with text on stdin and buffers both output streams."""

    def run(self, argv: Sequence[str], input_text: str, *, timeout: float | None) -> ProcessResult:
        """Run ``argv`` to completion, blocking the caller.

        Raises:
            OSError: If the process cannot be started.
            subprocess.TimeoutExpired: If ``timeout`` seconds pass first; the
                process has been killed.
        """
        ...

    async def run_async(self, argv: Sequence[str], input_text: str) -> ProcessResult:
        """Run ``argv`` to completion without blocking the event loop.

        Cancelling the awaiting task kills the process.

        Raises:
            OSError: If the process cannot be started.
        """
        ...


class SubprocessRunner:
    """`ProcessRunner` backed by `subprocess` and `asyncio` subprocesses."""

    def run(self, argv: Sequence[str], input_text: str, *, timeout: float | None) -> ProcessResult:
        """Run ``argv`` with `subprocess.run` (see `ProcessRunner.run`)."""
        logger.trace("Running formatter: %s", argv)
        completed: subprocess.CompletedProcess[str] = subprocess.run(
            list(argv),
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
        return ProcessResult(
            argv=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    async def run_async(self, argv: Sequence[str], input_text: str) -> ProcessResult:
        """Run ``argv`` as an asyncio subprocess (see `ProcessRunner.run_async`)."""
        logger.trace("Starting formatter: %s", argv)
        proc: asyncio.subprocess.Process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            stdout, stderr = await proc.communicate(input_text.encode("utf-8", errors="replace"))
        except asyncio.CancelledError:
            if proc.returncode is None:
                logger.debug("Killing formatter process %s", proc.pid)
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
                await proc.wait()
            raise
        return ProcessResult(
            argv=tuple(argv),
            returncode=proc.returncode if proc.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
