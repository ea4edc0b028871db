"""Backing stores for the album cache.

MemoryAlbumStore is the default: unbounded, entries leave only through
invalidation.  LRUAlbumStore adds a size bound for processes that see
many distinct titles.
"""

from albumcache.providers.store.lru_store import LRUAlbumStore
from albumcache.providers.store.memory_store import MemoryAlbumStore

__all__ = ["LRUAlbumStore", "MemoryAlbumStore"]
