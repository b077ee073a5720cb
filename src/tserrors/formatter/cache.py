# topmark:header:start
#
#   project      : TSErrors
#   file         : cache.py
#   file_relpath : src/tserrors/formatter/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded cache of formatted code snippets.

Entries are content-addressed: two segments with the same raw text share one
entry. Keys are a 31-bit rolling hash of the UTF-8 bytes; each entry also keeps
the raw content it was computed from, so a key collision reads as a miss
instead of returning another snippet's formatting.

Eviction is coarse: once the cache holds ``max_entries`` entries, the next
`FormatCache.set` clears everything before inserting.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from tserrors.config.logging import get_logger
from tserrors.constants import CACHE_HASH_MODULUS, CACHE_HASH_MULTIPLIER

if TYPE_CHECKING:
    from tserrors.config import Config
    from tserrors.config.logging import TsErrorsLogger

logger: TsErrorsLogger = get_logger(__name__)


def cache_key(content: str) -> str:
    """Return the deterministic cache key for ``content``.

    ``h = (h * 31 + byte) % 2147483647`` over the UTF-8 bytes, as a decimal
    string. Order- and case-sensitive.
    """
    h: int = 0
    for b in content.encode("utf-8", "surrogatepass"):
        h = (h * CACHE_HASH_MULTIPLIER + b) % CACHE_HASH_MODULUS
    return str(h)


class FormatCache:
    """Key → formatted-string store with full-clear eviction.

    All operations are serialized with a re-entrant lock; `set` clears and
    inserts as one step.

    Args:
        enabled (bool): When False, `get` always misses and `set` is a no-op.
        max_entries (int): Entry count at which `set` clears the cache first.
            ``0`` stores nothing.
    """

    def __init__(self, *, enabled: bool = True, max_entries: int = 100) -> None:
        self._enabled: bool = enabled
        self._max_entries: int = max_entries
        self._entries: dict[str, tuple[str, str]] = {}
        self._lock = RLock()

    @classmethod
    def from_config(cls, config: Config) -> FormatCache:
        """Build a cache from the ``[cache]`` settings of ``config``."""
        return cls(enabled=config.cache_enabled, max_entries=config.cache_max_entries)

    @property
    def enabled(self) -> bool:
        """Whether caching is enabled."""
        return self._enabled

    @property
    def max_entries(self) -> int:
        """Configured maximum entry count."""
        return self._max_entries

    def get(self, content: str) -> str | None:
        """Return the cached formatting of ``content``, or ``None`` on a miss."""
        if not self._enabled:
            return None
        with self._lock:
            entry: tuple[str, str] | None = self._entries.get(cache_key(content))
        if entry is None:
            return None
        raw, formatted = entry
        if raw != content:
            logger.debug("Cache key collision for %r; treating as miss", content[:40])
            return None
        return formatted

    def set(self, content: str, formatted: str) -> None:
        """Store ``formatted`` for ``content``, clearing the cache first when full."""
        if not self._enabled or self._max_entries <= 0:
            return
        key: str = cache_key(content)
        with self._lock:
            if len(self._entries) >= self._max_entries:
                logger.debug("Format cache full (%d entries); clearing", len(self._entries))
                self._entries.clear()
            self._entries[key] = (content, formatted)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
