# topmark:header:start
#
#   project      : TSErrors
#   file         : context.py
#   file_relpath : src/tserrors/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Explicit owner of the formatting pipeline's shared state.

A `TsErrorsContext` bundles the frozen config with the objects that carry
state across calls: the format cache and the formatter locator memo. Build one
at startup and pass it around; call `TsErrorsContext.reset` to forget cached
formatting and formatter detection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tserrors.config import Config, MutableConfig
from tserrors.config.logging import get_logger
from tserrors.formatter.cache import FormatCache
from tserrors.formatter.client import FormatterClient
from tserrors.formatter.locator import FormatterLocator
from tserrors.formatter.process import SubprocessRunner

if TYPE_CHECKING:
    from tserrors.config.logging import TsErrorsLogger
    from tserrors.formatter.process import ProcessRunner

logger: TsErrorsLogger = get_logger(__name__)


@dataclass(frozen=True)
class TsErrorsContext:
    """Config, cache, locator, runner and client for one application.

    Attributes:
        config (Config): Immutable settings.
        cache (FormatCache): Shared format cache.
        locator (FormatterLocator): Memoizing formatter search.
        runner (ProcessRunner): Process capability.
        client (FormatterClient): Client wired to the objects above.
    """

    config: Config
    cache: FormatCache
    locator: FormatterLocator
    runner: ProcessRunner
    client: FormatterClient

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        *,
        runner: ProcessRunner | None = None,
        locator: FormatterLocator | None = None,
    ) -> TsErrorsContext:
        """Build a context from ``config`` (built-in defaults when omitted).

        Args:
            config (Config | None): Frozen config; no files are read when omitted.
            runner (ProcessRunner | None): Process capability; `SubprocessRunner`
                if omitted.
            locator (FormatterLocator | None): Formatter search; built from
                ``config`` if omitted.

        Returns:
            TsErrorsContext: A ready-to-use context.
        """
        cfg: Config = config if config is not None else MutableConfig.from_defaults().freeze()
        cache: FormatCache = FormatCache.from_config(cfg)
        loc: FormatterLocator = locator if locator is not None else FormatterLocator.from_config(cfg)
        run: ProcessRunner = runner if runner is not None else SubprocessRunner()
        client = FormatterClient(cfg, cache=cache, locator=loc, runner=run)
        logger.debug(
            "Created context (cache=%s, max_entries=%d)", cfg.cache_enabled, cfg.cache_max_entries
        )
        return cls(config=cfg, cache=cache, locator=loc, runner=run, client=client)

    def reset(self) -> None:
        """Clear the format cache and forget formatter detection."""
        self.cache.clear()
        self.locator.reset()
