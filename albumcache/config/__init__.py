"""Configuration module: exports Settings and load_config."""

from albumcache.config.loader import load_config
from albumcache.config.settings import Settings

__all__ = ["Settings", "load_config"]
