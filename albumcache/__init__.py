"""albumcache: a local metadata cache in front of a remote photo-album service.

Typical use::

    cache = build_album_cache()
    lookup = await cache.get_album("Holidays")
    if lookup.is_miss:
        album = await remote.create_album("Holidays")
        await cache.put_album(album)
"""

from albumcache.interfaces.album_cache import IAlbumCache
from albumcache.interfaces.album_repository import IAlbumRepository
from albumcache.interfaces.album_store import IAlbumStore
from albumcache.main import build_album_cache, build_album_service, build_album_store
from albumcache.models.album import Album, AlbumLookup
from albumcache.providers.cache.album_cache import AlbumCache
from albumcache.providers.store.lru_store import LRUAlbumStore
from albumcache.providers.store.memory_store import MemoryAlbumStore
from albumcache.services.album_service import AlbumService
from albumcache.utils.errors import (
    AlbumCacheError,
    AlbumNotFoundError,
    AlbumSerializationError,
    AlbumStoreError,
    ConfigurationError,
    RemoteAlbumError,
)

__all__ = [
    "Album",
    "AlbumCache",
    "AlbumCacheError",
    "AlbumLookup",
    "AlbumNotFoundError",
    "AlbumSerializationError",
    "AlbumService",
    "AlbumStoreError",
    "ConfigurationError",
    "IAlbumCache",
    "IAlbumRepository",
    "IAlbumStore",
    "LRUAlbumStore",
    "MemoryAlbumStore",
    "RemoteAlbumError",
    "build_album_cache",
    "build_album_service",
    "build_album_store",
]
