"""Size-bounded album store using ``cachetools.LRUCache``.

Opt-in alternative to :class:`MemoryAlbumStore` for long-running processes
that see an unbounded number of album titles.  Once ``max_size`` entries
are held, inserting a new title evicts the least recently used one.
Evicted titles simply become misses again.
"""

from __future__ import annotations

import threading

import structlog
from cachetools import LRUCache

from albumcache.interfaces.album_store import IAlbumStore


class LRUAlbumStore(IAlbumStore):
    """Bounded store backed by ``cachetools.LRUCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries held before the least recently used
        entry is evicted.
    """

    def __init__(self, max_size: int = 1000) -> None:
        self._max_size = max_size
        self._entries: LRUCache[str, str] = LRUCache(maxsize=max_size)
        # LRUCache reorders itself on every read, so lookups lock too.
        self._lock = threading.Lock()
        self._logger: structlog.BoundLogger = structlog.get_logger(logger_name=__name__)

    @property
    def max_size(self) -> int:
        return self._max_size

    def get_store_name(self) -> str:
        return "lru"

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            evicting = key not in self._entries and len(self._entries) >= self._max_size
            self._entries[key] = value
        if evicting:
            self._logger.debug("album_store_evicted", max_size=self._max_size)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
