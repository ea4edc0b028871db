"""Custom exception hierarchy for albumcache.

All application exceptions inherit from :class:`AlbumCacheError`, which
carries an optional ``store_name`` so error handlers can tell which backing
store (e.g. "memory", "lru") raised the failure.

    AlbumCacheError  (base -- catch-all for any albumcache error)
    +-- AlbumStoreError          (backing store unavailable or corrupted)
    |   +-- AlbumSerializationError  (stored value cannot be decoded)
    +-- ConfigurationError       (startup / invalid cache config)
    +-- RemoteAlbumError         (remote photo service call failed)
        +-- AlbumNotFoundError   (no remote album with the requested title)

A cache miss is deliberately absent from this hierarchy: lookups report
a miss through :class:`~albumcache.models.album.AlbumLookup`, never by
raising.
"""


class AlbumCacheError(Exception):
    """Base exception for all albumcache errors.

    The ``__str__`` method prefixes the store name in brackets for log
    output, e.g. ``[lru] Backing store unavailable``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        store_name: str | None = None,
    ) -> None:
        self._message = message
        self._store_name = store_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def store_name(self) -> str | None:
        return self._store_name

    def __str__(self) -> str:
        if self._store_name:
            return f"[{self._store_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Backing store errors
# ---------------------------------------------------------------------------

class AlbumStoreError(AlbumCacheError):
    """Raised when the backing store cannot complete an operation.

    Never converted into a cache miss.  Callers decide whether the failure
    is fatal or whether they skip the cache and go straight to the remote
    service.
    """

    def __init__(
        self,
        message: str = "Backing store unavailable",
        store_name: str | None = None,
    ) -> None:
        super().__init__(message=message, store_name=store_name)


class AlbumSerializationError(AlbumStoreError):
    """Raised when an album cannot be encoded for, or decoded from, the store."""

    def __init__(
        self,
        message: str = "Album serialization failed",
        store_name: str | None = None,
    ) -> None:
        super().__init__(message=message, store_name=store_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(AlbumCacheError):
    """Raised when the cache configuration is invalid at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        store_name: str | None = None,
    ) -> None:
        super().__init__(message=message, store_name=store_name)


# ---------------------------------------------------------------------------
# Remote service errors (raised by the album-management layer)
# ---------------------------------------------------------------------------

class RemoteAlbumError(AlbumCacheError):
    """Raised when a call to the remote photo service fails."""

    def __init__(
        self,
        message: str = "Remote album service call failed",
        store_name: str | None = None,
    ) -> None:
        super().__init__(message=message, store_name=store_name)


class AlbumNotFoundError(RemoteAlbumError):
    """Raised when the remote service holds no album with the given title."""

    def __init__(
        self,
        message: str = "Album not found",
        store_name: str | None = None,
    ) -> None:
        super().__init__(message=message, store_name=store_name)
