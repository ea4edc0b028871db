"""Concrete implementations of the interfaces in ``albumcache.interfaces``."""
