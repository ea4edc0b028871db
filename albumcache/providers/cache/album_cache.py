"""Album cache over an injected backing store.

Implements :class:`IAlbumCache` by translating each operation onto an
:class:`IAlbumStore`: albums are serialized to JSON with pydantic on the
way in and validated back into :class:`Album` on the way out.

Store failures are logged and re-raised as :class:`AlbumStoreError`.  They
are never reported as a miss, because that would hide an unavailable
store behind "data absent".
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

import structlog
from pydantic import ValidationError

from albumcache.interfaces.album_cache import IAlbumCache
from albumcache.interfaces.album_store import IAlbumStore
from albumcache.models.album import Album, AlbumLookup
from albumcache.utils.errors import (
    AlbumCacheError,
    AlbumSerializationError,
    AlbumStoreError,
)

_T = TypeVar("_T")


class AlbumCache(IAlbumCache):
    """Title-keyed album cache.

    Parameters
    ----------
    store:
        The backing store.  The cache assumes exclusive ownership; nothing
        else should read or write it directly.
    """

    def __init__(self, store: IAlbumStore) -> None:
        self._store = store
        self._store_name = store.get_store_name()
        self._logger: structlog.BoundLogger = structlog.get_logger(logger_name=__name__)

    @property
    def store(self) -> IAlbumStore:
        return self._store

    # ------------------------------------------------------------------
    # IAlbumCache implementation
    # ------------------------------------------------------------------

    async def get_album(self, title: str) -> AlbumLookup:
        """Return a hit with the cached album, or a miss if none is stored."""
        raw = self._call_store("get", lambda: self._store.get(title), title)
        if raw is None:
            self._logger.debug("album_cache_miss", title=title)
            return AlbumLookup.miss(title)

        album = self._deserialize(title, raw)
        self._logger.debug("album_cache_hit", title=title)
        return AlbumLookup.hit(album)

    async def put_album(self, album: Album) -> None:
        """Insert or overwrite the entry keyed by ``album.title``."""
        self._write(album)
        self._logger.debug("album_cache_put", title=album.title)

    async def put_many_albums(self, albums: Iterable[Album]) -> None:
        """Write each album in order; the last one wins for duplicate titles.

        Accepts any iterable, including a one-shot generator.  Entries
        written before a failing one are kept.
        """
        count = 0
        for album in albums:
            self._write(album)
            count += 1
        self._logger.debug("album_cache_put_many", count=count)

    async def invalidate_album(self, title: str) -> None:
        """Drop the entry for *title* if present."""
        self._call_store("delete", lambda: self._store.delete(title), title)
        self._logger.debug("album_cache_invalidate", title=title)

    # ------------------------------------------------------------------
    # Store adapter helpers
    # ------------------------------------------------------------------

    def _write(self, album: Album) -> None:
        raw = self._serialize(album)
        self._call_store("put", lambda: self._store.put(album.title, raw), album.title)

    def _serialize(self, album: Album) -> str:
        try:
            return album.model_dump_json()
        except (ValueError, TypeError) as exc:
            self._logger.error("album_cache_serialize_failed", title=album.title, error=str(exc))
            raise AlbumSerializationError(
                message=f"Could not serialize album {album.title!r}: {exc}",
                store_name=self._store_name,
            ) from exc

    def _deserialize(self, title: str, raw: str) -> Album:
        try:
            return Album.model_validate_json(raw)
        except ValidationError as exc:
            self._logger.error("album_cache_corrupt_entry", title=title, error=str(exc))
            raise AlbumSerializationError(
                message=f"Stored value for {title!r} is not a valid album",
                store_name=self._store_name,
            ) from exc

    def _call_store(self, operation: str, call: Callable[[], _T], title: str) -> _T:
        """Run *call* against the store, surfacing any failure as AlbumStoreError."""
        try:
            return call()
        except AlbumCacheError as exc:
            self._logger.error(
                "album_store_failed", operation=operation, title=title, error=str(exc)
            )
            raise
        except Exception as exc:
            self._logger.error(
                "album_store_failed", operation=operation, title=title, error=str(exc)
            )
            raise AlbumStoreError(
                message=f"Store {operation} failed for {title!r}: {exc}",
                store_name=self._store_name,
            ) from exc
