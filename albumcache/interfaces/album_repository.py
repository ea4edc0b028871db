"""Abstract base class for the remote photo-album service.

The album-management layer talks to the remote service only through this
interface.  Authentication, HTTP transport and request marshalling belong
to concrete adapters that live in the host application.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from albumcache.models.album import Album


class IAlbumRepository(ABC):
    """Contract for remote album operations."""

    @abstractmethod
    async def list_albums(self) -> list[Album]:
        """Return every album the authenticated user can see."""

    @abstractmethod
    async def create_album(self, title: str) -> Album:
        """Create an album titled *title* and return it with remote metadata."""

    @abstractmethod
    async def update_album_title(self, album_id: str, title: str) -> Album:
        """Rename the album identified by *album_id* and return the result."""
