"""Unit tests for MemoryAlbumStore and LRUAlbumStore."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from albumcache.providers.store.lru_store import LRUAlbumStore
from albumcache.providers.store.memory_store import MemoryAlbumStore


# ======================================================================
# MemoryAlbumStore
# ======================================================================


class TestMemoryAlbumStore:
    @pytest.fixture()
    def store(self) -> MemoryAlbumStore:
        return MemoryAlbumStore()

    def test_get_missing_key_returns_none(self, store: MemoryAlbumStore) -> None:
        assert store.get("nonexistent") is None

    def test_put_and_get(self, store: MemoryAlbumStore) -> None:
        store.put("key1", "value1")
        assert store.get("key1") == "value1"

    def test_put_overwrites_existing(self, store: MemoryAlbumStore) -> None:
        store.put("key1", "old")
        store.put("key1", "new")
        assert store.get("key1") == "new"
        assert len(store) == 1

    def test_empty_string_key(self, store: MemoryAlbumStore) -> None:
        store.put("", "value")
        assert store.get("") == "value"

    def test_delete_removes_key(self, store: MemoryAlbumStore) -> None:
        store.put("key1", "value1")
        store.delete("key1")
        assert store.get("key1") is None

    def test_delete_nonexistent_is_noop(self, store: MemoryAlbumStore) -> None:
        store.put("key1", "value1")
        store.delete("nonexistent")  # should not raise
        assert len(store) == 1

    def test_store_name(self, store: MemoryAlbumStore) -> None:
        assert store.get_store_name() == "memory"

    def test_never_evicts(self, store: MemoryAlbumStore) -> None:
        for i in range(5000):
            store.put(f"album-{i}", "{}")
        assert len(store) == 5000
        assert store.get("album-0") == "{}"

    def test_concurrent_writers_lose_nothing(self, store: MemoryAlbumStore) -> None:
        def write(worker: int) -> None:
            for i in range(500):
                store.put(f"{worker}-{i}", str(i))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(write, range(8)))

        assert len(store) == 4000
        assert store.get("7-499") == "499"


# ======================================================================
# LRUAlbumStore
# ======================================================================


class TestLRUAlbumStore:
    @pytest.fixture()
    def store(self) -> LRUAlbumStore:
        return LRUAlbumStore(max_size=3)

    def test_put_and_get(self, store: LRUAlbumStore) -> None:
        store.put("a", "1")
        assert store.get("a") == "1"

    def test_store_name_and_size(self, store: LRUAlbumStore) -> None:
        assert store.get_store_name() == "lru"
        assert store.max_size == 3

    def test_no_eviction_within_bound(self, store: LRUAlbumStore) -> None:
        for key in ("a", "b", "c"):
            store.put(key, key)
        assert len(store) == 3
        assert all(store.get(key) == key for key in ("a", "b", "c"))

    def test_evicts_least_recently_used(self, store: LRUAlbumStore) -> None:
        for key in ("a", "b", "c"):
            store.put(key, key)
        store.get("a")  # "b" is now least recently used
        store.put("d", "d")

        assert len(store) == 3
        assert store.get("b") is None
        assert store.get("a") == "a"
        assert store.get("d") == "d"

    def test_overwrite_does_not_evict(self, store: LRUAlbumStore) -> None:
        for key in ("a", "b", "c"):
            store.put(key, key)
        store.put("a", "updated")

        assert len(store) == 3
        assert store.get("a") == "updated"
        assert store.get("b") == "b"

    def test_delete_nonexistent_is_noop(self, store: LRUAlbumStore) -> None:
        store.delete("missing")  # should not raise
        assert len(store) == 0

    def test_concurrent_readers_and_writers(self) -> None:
        store = LRUAlbumStore(max_size=100)

        def churn(worker: int) -> None:
            for i in range(300):
                store.put(f"{worker}-{i}", "v")
                store.get(f"{worker}-{i // 2}")

        with ThreadPoolExecutor(max_workers=6) as pool:
            list(pool.map(churn, range(6)))

        assert len(store) == 100
