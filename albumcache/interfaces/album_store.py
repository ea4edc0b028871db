"""Abstract base class for album backing stores.

A backing store is the associative structure an album cache wraps: point
lookup, point upsert and point deletion of serialized album values by key.
Enumeration is not part of the contract.  Implementations own their
storage exclusively and must be safe to call from several threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IAlbumStore(ABC):
    """Contract for key → serialized-album storage.

    Methods are synchronous: stores are in-process and every call returns
    without waiting on I/O.  Implementations raise
    :class:`~albumcache.utils.errors.AlbumStoreError` when the underlying
    storage is unavailable.
    """

    @abstractmethod
    def get_store_name(self) -> str:
        """Return a short name for this store, used in logs and errors."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the serialized value stored under *key*, or ``None``.

        Parameters
        ----------
        key:
            The album title to look up.  The empty string is a valid key.
        """

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any existing value.

        Parameters
        ----------
        key:
            The album title.
        value:
            The serialized album.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the value stored under *key*.

        This is a no-op if the key does not exist.
        """

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored entries."""
