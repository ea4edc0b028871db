from albumcache.services.album_service import AlbumService

__all__ = ["AlbumService"]
