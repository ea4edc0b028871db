"""albumcache domain models: re-exports all public model classes.

    - album.py: the cached Album and the AlbumLookup hit/miss result
"""

from __future__ import annotations

from albumcache.models.album import Album, AlbumLookup

__all__ = ["Album", "AlbumLookup"]
