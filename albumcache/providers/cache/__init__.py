"""Album cache providers.

AlbumCache wraps any IAlbumStore and owns serialization and the hit/miss
contract.  Swap the store (memory, LRU, or a host-provided one) without
changing the code that uses the cache.
"""

from albumcache.providers.cache.album_cache import AlbumCache

__all__ = ["AlbumCache"]
