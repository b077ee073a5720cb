# topmark:header:start
#
#   project      : TSErrors
#   file         : config_resolver.py
#   file_relpath : src/tserrors/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build the effective `Config` from Click parameters.

Bridges CLI parsing and the configuration layer: discovers and merges config
files (unless ``--no-config``), merges ``--config`` files, then applies CLI
overrides and freezes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from tserrors.cli.cli_types import build_args_namespace
from tserrors.cli.errors import TsErrorsConfigError
from tserrors.config import MutableConfig
from tserrors.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tserrors.cli.cli_types import ArgsNamespace
    from tserrors.config import Config
    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool = False,
    config_paths: Sequence[str] = (),
    formatter_cmd: str | None = None,
    print_width: int | None = None,
    timeout_ms: int | None = None,
    sync_format: bool | None = None,
    no_cache: bool = False,
    title: str | None = None,
) -> Config:
    """Return the frozen configuration for one command invocation.

    Raises:
        TsErrorsConfigError: If a file passed with ``--config`` does not exist.
    """
    extra_files: list[Path] = [Path(p) for p in config_paths]
    for path in extra_files:
        if not path.is_file():
            raise TsErrorsConfigError(f"Config file not found: {path}")

    draft: MutableConfig = MutableConfig.load_merged(
        anchor=Path.cwd(),
        extra_config_files=extra_files,
        no_config=no_config,
    )
    args: ArgsNamespace = build_args_namespace(
        formatter_cmd=formatter_cmd,
        print_width=print_width,
        timeout_ms=timeout_ms,
        sync_format=sync_format,
        no_cache=no_cache,
        title=title,
    )
    config: Config = draft.apply_cli_args(args).freeze()
    logger.trace("Effective config: %s", config)
    return config
