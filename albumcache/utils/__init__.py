"""Shared utilities: the exception hierarchy and structlog configuration."""
