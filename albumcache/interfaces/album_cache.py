"""Abstract base class for album caches.

Defines the contract the album-management layer relies on to avoid
repeating remote lookups and re-creating albums that already exist.
Entries are keyed by album title and live until explicitly invalidated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from albumcache.models.album import Album, AlbumLookup


class IAlbumCache(ABC):
    """Contract for title-keyed album caches.

    All operations are async so a network-backed cache can implement the
    same interface; the in-memory implementation never suspends.
    """

    @abstractmethod
    async def get_album(self, title: str) -> AlbumLookup:
        """Look up the album cached under *title*.

        Returns
        -------
        AlbumLookup
            A hit carrying the stored album, or a miss (``is_miss`` is
            ``True``) when no entry exists.  A miss is never raised.

        Raises
        ------
        AlbumStoreError
            If the backing store fails or holds an undecodable value.
        """

    @abstractmethod
    async def put_album(self, album: Album) -> None:
        """Insert or overwrite the entry keyed by ``album.title``."""

    @abstractmethod
    async def put_many_albums(self, albums: Sequence[Album]) -> None:
        """Insert or overwrite one entry per album, in order.

        Later albums win over earlier ones with the same title.  Not
        transactional: if the store fails partway through, albums already
        written stay written and the error propagates.
        """

    @abstractmethod
    async def invalidate_album(self, title: str) -> None:
        """Remove the entry for *title*; a no-op if it is absent."""
