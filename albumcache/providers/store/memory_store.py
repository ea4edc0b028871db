"""Unbounded in-memory album store backed by a plain ``dict``.

Entries are removed only by explicit deletion; there is no size bound and
no expiry.  Suitable for a single process; contents do not survive a
restart.
"""

from __future__ import annotations

import threading

from albumcache.interfaces.album_store import IAlbumStore


class MemoryAlbumStore(IAlbumStore):
    """Dict-backed store guarded by a single mutation lock.

    Reads go straight to the dict without taking the lock, so concurrent
    readers never wait on each other.  Single-key dict reads and writes
    are atomic under the interpreter lock, so a reader sees either the old
    or the new value, never a torn one.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def get_store_name(self) -> str:
        return "memory"

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
