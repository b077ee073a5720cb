# topmark:header:start
#
#   project      : TSErrors
#   file         : locator.py
#   file_relpath : src/tserrors/formatter/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the formatter executable.

Search order:
    1. ``[formatter].cmd`` override, used as given;
    2. ``prettier`` in each search directory (``[formatter].search_paths``,
       then the Neovim Mason bin directory);
    3. ``prettier`` on ``PATH``;
    4. ``prettierd`` in the search directories, then on ``PATH``.

Regular ``prettier`` is preferred because ``prettierd`` takes no CLI options
(no ``--print-width``). The answer, including "not found", is memoized until
`FormatterLocator.reset` is called.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from threading import RLock
from typing import TYPE_CHECKING, Final

from tserrors.config.logging import get_logger
from tserrors.constants import PRETTIERD_STDIN_FILENAME

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from tserrors.config import Config
    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)

PRETTIER: Final[str] = "prettier"
PRETTIERD: Final[str] = "prettierd"


def mason_bin_dir() -> Path:
    """Return the Mason package bin directory (``$XDG_DATA_HOME/nvim/mason/bin``)."""
    xdg: str | None = os.environ.get("XDG_DATA_HOME")
    base: Path = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / "nvim" / "mason" / "bin"


@dataclass(frozen=True)
class FormatterCommand:
    """A located formatter executable.

    Attributes:
        executable (str): Path or name used as ``argv[0]``.
        is_daemon (bool): True for ``prettierd``, which is driven by a file
            name hint instead of CLI options.
    """

    executable: str
    is_daemon: bool = False

    @classmethod
    def for_executable(cls, executable: str) -> FormatterCommand:
        """Return a command, detecting ``prettierd`` by its file name."""
        name: str = Path(executable).name
        return cls(executable=executable, is_daemon=name.startswith(PRETTIERD))

    def argv(self, *, print_width: int, args: Sequence[str]) -> list[str]:
        """Return the command line for one formatting run.

        Args:
            print_width (int): Requested line width (ignored by ``prettierd``).
            args (Sequence[str]): Extra arguments (ignored by ``prettierd``).

        Returns:
            list[str]: ``[exe, "--print-width", <n>, *args]`` or
            ``[prettierd, "stdin.ts"]``.
        """
        if self.is_daemon:
            return [self.executable, PRETTIERD_STDIN_FILENAME]
        return [self.executable, "--print-width", str(print_width), *args]


class FormatterLocator:
    """Memoizing formatter search.

    Args:
        cmd (str | None): Explicit executable; skips the search.
        search_paths (Iterable[Path]): Directories searched before ``PATH``.
        include_mason (bool): Append `mason_bin_dir` to ``search_paths``.
        which (Callable | None): Lookup function with `shutil.which` semantics.
    """

    def __init__(
        self,
        *,
        cmd: str | None = None,
        search_paths: Iterable[Path] = (),
        include_mason: bool = True,
        which: Callable[..., str | None] | None = None,
    ) -> None:
        self._cmd: str | None = cmd
        dirs: list[Path] = list(search_paths)
        if include_mason:
            dirs.append(mason_bin_dir())
        self._search_paths: tuple[Path, ...] = tuple(dirs)
        self._which: Callable[..., str | None] = which or shutil.which
        self._lock = RLock()
        self._checked: bool = False
        self._found: FormatterCommand | None = None

    @classmethod
    def from_config(cls, config: Config) -> FormatterLocator:
        """Build a locator from the ``[formatter]`` settings of ``config``."""
        return cls(cmd=config.formatter_cmd, search_paths=config.search_paths)

    @property
    def search_paths(self) -> tuple[Path, ...]:
        """Directories searched before ``PATH``, in order."""
        return self._search_paths

    def locate(self) -> FormatterCommand | None:
        """Return the formatter to use, or ``None`` if none is available."""
        with self._lock:
            if not self._checked:
                self._found = self._search()
                self._checked = True
                if self._found is None:
                    logger.debug("No formatter found (searched %s and PATH)", self._search_paths)
                else:
                    logger.debug("Using formatter: %s", self._found.executable)
            return self._found

    def reset(self) -> None:
        """Forget the memoized result; the next `locate` searches again."""
        with self._lock:
            self._checked = False
            self._found = None

    def _search(self) -> FormatterCommand | None:
        if self._cmd:
            return FormatterCommand.for_executable(self._cmd)
        for name in (PRETTIER, PRETTIERD):
            for directory in self._search_paths:
                found: str | None = self._which(name, path=str(directory))
                if found:
                    return FormatterCommand.for_executable(found)
            found = self._which(name)
            if found:
                return FormatterCommand.for_executable(found)
        return None
