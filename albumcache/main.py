"""Wiring for the album cache.

Builds a backing store, the cache over it, and the album service from a
resolved configuration dict (see :func:`albumcache.config.load_config`).
Host applications call :func:`build_album_service` with their own remote
repository adapter.
"""

from __future__ import annotations

import structlog

from albumcache.config.loader import load_config
from albumcache.interfaces.album_cache import IAlbumCache
from albumcache.interfaces.album_repository import IAlbumRepository
from albumcache.interfaces.album_store import IAlbumStore
from albumcache.providers.cache.album_cache import AlbumCache
from albumcache.providers.store.lru_store import LRUAlbumStore
from albumcache.providers.store.memory_store import MemoryAlbumStore
from albumcache.services.album_service import AlbumService
from albumcache.utils.errors import ConfigurationError
from albumcache.utils.logging import configure_logging

_logger: structlog.BoundLogger = structlog.get_logger(logger_name=__name__)


def build_album_store(config: dict) -> IAlbumStore:
    """Select the backing store named by ``config["cache"]["backend"]``.

    Raises
    ------
    ConfigurationError
        For an unknown backend, a ``cache`` section that is not a mapping,
        or an ``lru`` backend without a positive ``max_size``.
    """
    cache_config = config.get("cache") or {}
    if not isinstance(cache_config, dict):
        raise ConfigurationError(message=f"cache section must be a mapping, got {cache_config!r}")
    backend = str(cache_config.get("backend", "memory")).lower()

    if backend == "memory":
        return MemoryAlbumStore()

    if backend == "lru":
        max_size = cache_config.get("max_size")
        if not isinstance(max_size, int) or isinstance(max_size, bool) or max_size <= 0:
            raise ConfigurationError(
                message=f"cache.max_size must be a positive integer, got {max_size!r}",
                store_name="lru",
            )
        return LRUAlbumStore(max_size=max_size)

    raise ConfigurationError(message=f"Unknown cache backend {backend!r}")


def build_album_cache(config: dict | None = None) -> IAlbumCache:
    """Build an :class:`AlbumCache` from *config*, loading it if omitted.

    When the config is loaded here, logging is configured from it too.
    """
    if config is None:
        config = load_config()
        configure_logging(
            log_level=config.get("logging", {}).get("level", "INFO"),
            json_output=(config.get("app", {}).get("env") == "production"),
        )

    store = build_album_store(config)
    _logger.info("album_cache_ready", store=store.get_store_name())
    return AlbumCache(store)


def build_album_service(
    repository: IAlbumRepository,
    config: dict | None = None,
) -> AlbumService:
    """Build an :class:`AlbumService` over *repository* with a fresh cache."""
    return AlbumService(repository=repository, cache=build_album_cache(config))
