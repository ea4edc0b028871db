"""Album models for the albumcache package.

Defines Pydantic v2 models for a remote photo-service album and for the
result of a cache lookup.  Both are frozen: a cached album is a snapshot
and callers replace it with a new Put rather than mutating it in place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Album: mirrors the remote service's album resource.
# ---------------------------------------------------------------------------
class Album(BaseModel):
    """A named collection of media items in the remote photo service.

    ``title`` is the cache key.  Every field defaults to its zero value so
    an ``Album()`` with an empty title is a legal (if unusual) entry.
    """

    model_config = ConfigDict(frozen=True)

    # Remote-assigned identifier.
    id: str = ""
    # Human-readable, unique within the cache.
    title: str = ""
    product_url: str = ""
    # False for shared albums the user cannot add media to.
    is_writeable: bool = False
    # The remote API reports this int64 as a string.
    media_items_count: str = ""
    cover_photo_base_url: str = ""
    cover_photo_media_item_id: str = ""


# ---------------------------------------------------------------------------
# AlbumLookup: tagged result of IAlbumCache.get_album().
# ---------------------------------------------------------------------------
class AlbumLookup(BaseModel):
    """Outcome of looking up one title in the cache.

    A miss carries ``album=None``.  Callers branch on :attr:`is_miss` and
    fall back to the remote service; a miss is ordinary control flow, not
    an error.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    album: Album | None = None

    @classmethod
    def hit(cls, album: Album) -> AlbumLookup:
        return cls(title=album.title, album=album)

    @classmethod
    def miss(cls, title: str) -> AlbumLookup:
        return cls(title=title)

    @property
    def is_hit(self) -> bool:
        return self.album is not None

    @property
    def is_miss(self) -> bool:
        return self.album is None
