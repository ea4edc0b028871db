"""YAML configuration loader with environment variable overrides.

Configuration is resolved in layers, later layers winning:

  1. Defaults declared on :class:`Settings`
  2. ``config/config.yaml``
  3. Values explicitly provided through ``.env`` or environment variables

The result is a plain dict with ``app``, ``cache`` and ``logging``
sections, which is what :mod:`albumcache.main` consumes.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from albumcache.config.settings import Settings
from albumcache.utils.errors import ConfigurationError

# Settings field -> (config section, key within section)
_FIELD_MAP: dict[str, tuple[str, str]] = {
    "app_env": ("app", "env"),
    "album_cache_backend": ("cache", "backend"),
    "album_cache_max_size": ("cache", "max_size"),
    "log_level": ("logging", "level"),
}


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge it between Settings defaults and env overrides.

    Args:
        path: Path to the YAML configuration file.  A missing file is fine.
        settings: Pre-built settings; read from the environment when omitted.

    Returns:
        Fully resolved configuration dictionary.

    Raises:
        ConfigurationError: If the YAML is malformed or not a mapping, or an
            environment variable cannot be parsed into its Settings field.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            try:
                yaml_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(message=f"Malformed YAML in {path}: {exc}") from exc
        if not isinstance(yaml_config, dict):
            raise ConfigurationError(message=f"{path} must contain a mapping at top level")
    else:
        yaml_config = {}

    if settings is None:
        try:
            settings = Settings()
        except ValidationError as exc:
            raise ConfigurationError(message=f"Invalid environment settings: {exc}") from exc

    config = _settings_sections(settings, type(settings).model_fields)
    _deep_merge(config, yaml_config)
    # Only fields that were actually supplied override the YAML file.
    _deep_merge(config, _settings_sections(settings, settings.model_fields_set))
    return config


def _settings_sections(settings: Settings, fields) -> dict:
    """Project the named Settings fields into nested config sections."""
    sections: dict = {}
    for field in fields:
        if field not in _FIELD_MAP:
            continue
        section, key = _FIELD_MAP[field]
        sections.setdefault(section, {})[key] = getattr(settings, field)
    return sections


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place.

    ``None`` overrides are skipped: YAML parses a section whose keys are all
    commented out as ``None``, which must leave the defaults in place.
    """
    for key, value in overrides.items():
        if value is None:
            continue
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
