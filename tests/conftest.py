"""Shared pytest fixtures for the albumcache test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from albumcache.interfaces.album_store import IAlbumStore
from albumcache.models.album import Album
from albumcache.providers.cache.album_cache import AlbumCache
from albumcache.providers.store.memory_store import MemoryAlbumStore


class FlakyAlbumStore(IAlbumStore):
    """In-memory store that fails on demand.

    ``fail_on`` names the operations ("get", "put", "delete") that raise.
    ``fail_after_puts`` lets that many puts succeed before every later put
    raises, to exercise partial batch writes.
    """

    def __init__(
        self,
        fail_on: set[str] | None = None,
        fail_after_puts: int | None = None,
    ) -> None:
        self.entries: dict[str, str] = {}
        self.fail_on = fail_on or set()
        self.fail_after_puts = fail_after_puts
        self.put_calls = 0

    def get_store_name(self) -> str:
        return "flaky"

    def get(self, key: str) -> str | None:
        if "get" in self.fail_on:
            raise ConnectionError("store offline")
        return self.entries.get(key)

    def put(self, key: str, value: str) -> None:
        self.put_calls += 1
        if "put" in self.fail_on:
            raise ConnectionError("store offline")
        if self.fail_after_puts is not None and self.put_calls > self.fail_after_puts:
            raise ConnectionError("store offline")
        self.entries[key] = value

    def delete(self, key: str) -> None:
        if "delete" in self.fail_on:
            raise ConnectionError("store offline")
        self.entries.pop(key, None)

    def __len__(self) -> int:
        return len(self.entries)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Return a minimal resolved configuration for testing."""
    return {
        "app": {"env": "test"},
        "cache": {"backend": "memory", "max_size": 1000},
        "logging": {"level": "INFO"},
    }


@pytest.fixture
def sample_album() -> Album:
    return Album(
        id="AF1QipN-holidays",
        title="Holidays 2024",
        product_url="https://photos.google.com/lr/album/AF1QipN-holidays",
        is_writeable=True,
        media_items_count="42",
        cover_photo_base_url="https://lh3.googleusercontent.com/cover",
        cover_photo_media_item_id="AF1QipM-cover",
    )


@pytest.fixture
def memory_store() -> MemoryAlbumStore:
    return MemoryAlbumStore()


@pytest.fixture
def cache(memory_store: MemoryAlbumStore) -> AlbumCache:
    return AlbumCache(memory_store)


@pytest.fixture
def make_flaky_store() -> type[FlakyAlbumStore]:
    """Return the FlakyAlbumStore class so tests can configure failures."""
    return FlakyAlbumStore
