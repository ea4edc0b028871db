"""Album-management service backed by the album cache.

Looks albums up by title without a remote round-trip when the cache
already knows them, and avoids creating a second remote album with a title
that already exists.  The service decides what a cache failure means:
it logs a warning and goes to the remote service as if the cache were
absent.  Remote failures propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from albumcache.interfaces.album_cache import IAlbumCache
from albumcache.interfaces.album_repository import IAlbumRepository
from albumcache.models.album import Album
from albumcache.utils.errors import AlbumNotFoundError, AlbumStoreError


class AlbumService:
    """Cache-aware album operations over a remote repository.

    Parameters
    ----------
    repository:
        Adapter for the remote photo service.
    cache:
        Optional album cache.  When ``None`` every call goes remote.
    """

    def __init__(
        self,
        repository: IAlbumRepository,
        cache: IAlbumCache | None = None,
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._logger: structlog.BoundLogger = structlog.get_logger(logger_name=__name__)

    async def list_albums(self) -> list[Album]:
        """Fetch every remote album and refresh the cache with the result."""
        albums = await self._repository.list_albums()
        await self._cache_put_many(albums)
        self._logger.info("albums_listed", count=len(albums))
        return albums

    async def get_by_title(self, title: str) -> Album:
        """Return the album titled *title*, consulting the cache first.

        Raises
        ------
        AlbumNotFoundError
            If the remote service has no album with that title.
        """
        cached = await self._cache_get(title)
        if cached is not None:
            return cached

        albums = await self.list_albums()
        # Match what put_many_albums kept: the last album with this title.
        for album in reversed(albums):
            if album.title == title:
                return album
        raise AlbumNotFoundError(message=f"No album titled {title!r}")

    async def get_or_create(self, title: str) -> Album:
        """Return the album titled *title*, creating it remotely if needed."""
        try:
            return await self.get_by_title(title)
        except AlbumNotFoundError:
            pass

        album = await self._repository.create_album(title)
        self._logger.info("album_created", title=title, album_id=album.id)
        await self._cache_put(album)
        return album

    async def rename(self, album: Album, new_title: str) -> Album:
        """Rename *album* remotely and move its cache entry to *new_title*."""
        renamed = await self._repository.update_album_title(album.id, new_title)
        await self.forget(album.title)
        await self._cache_put(renamed)
        self._logger.info(
            "album_renamed", album_id=album.id, old_title=album.title, new_title=renamed.title
        )
        return renamed

    async def forget(self, title: str) -> None:
        """Invalidate the cached entry for *title*, e.g. after a remote delete."""
        if self._cache is None:
            return
        try:
            await self._cache.invalidate_album(title)
        except AlbumStoreError as exc:
            self._logger.warning("album_cache_unavailable", operation="invalidate", error=str(exc))

    # -- Cache helpers ---------------------------------------------------------
    # A store failure only disables the cache for this call; the remote
    # service is still the source of truth.

    async def _cache_get(self, title: str) -> Album | None:
        if self._cache is None:
            return None
        try:
            lookup = await self._cache.get_album(title)
        except AlbumStoreError as exc:
            self._logger.warning("album_cache_unavailable", operation="get", error=str(exc))
            return None
        return lookup.album

    async def _cache_put(self, album: Album) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.put_album(album)
        except AlbumStoreError as exc:
            self._logger.warning("album_cache_unavailable", operation="put", error=str(exc))

    async def _cache_put_many(self, albums: Sequence[Album]) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.put_many_albums(albums)
        except AlbumStoreError as exc:
            self._logger.warning("album_cache_unavailable", operation="put_many", error=str(exc))
