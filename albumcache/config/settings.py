"""Application settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

  1. Environment variables, e.g. ``ALBUM_CACHE_BACKEND=lru``
  2. A ``.env`` file in the working directory
  3. The defaults declared below

Field names map to upper-cased environment variable names.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """albumcache settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Album cache ===
    # "memory" keeps every entry until invalidated; "lru" bounds the store
    # at album_cache_max_size entries.
    album_cache_backend: str = "memory"
    album_cache_max_size: int = 1000

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
