"""Public interface definitions for the cache, its stores and the remote service.

Concrete adapters implement these abstract base classes and are injected
at runtime, so the storage backend or the remote client can be swapped
without touching the code that uses them.

CONCRETE IMPLEMENTATION MAP:
    Interface          →  Implementations
    ─────────────────────────────────────────────────────────────
    IAlbumStore        →  MemoryAlbumStore, LRUAlbumStore
                          (albumcache/providers/store/)
    IAlbumCache        →  AlbumCache (albumcache/providers/cache/)
    IAlbumRepository   →  provided by the host application
"""

from albumcache.interfaces.album_cache import IAlbumCache
from albumcache.interfaces.album_repository import IAlbumRepository
from albumcache.interfaces.album_store import IAlbumStore

__all__ = ["IAlbumCache", "IAlbumRepository", "IAlbumStore"]
