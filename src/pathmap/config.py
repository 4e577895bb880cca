"""Configuration loading and dot-path access."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from pathmap.errors import ConfigError, ConfigNotFoundError, PathMapError
from pathmap.path_map import PathMap

__all__ = ["Config"]

logger = logging.getLogger(__name__)


class Config:
    """Configuration accessor with dot-path key support.

    Keys use the same grammar as ``PathMap.path``, so ``content.base_path``
    and ``sources#0.name`` both work.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        try:
            self._paths = PathMap(self._data)
        except PathMapError as e:
            raise ConfigError(message=f"Invalid configuration: {e.message}", cause=e) from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(config_path)
        if not path.is_file():
            raise ConfigNotFoundError(config_path=str(path))

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in {path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(message=f"Configuration file {path} must be a YAML mapping, got {type(data).__name__}")

        logger.debug("Loaded configuration from %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        try:
            value = self._paths.path(key)
        except PathMapError:
            return default
        return default if value is None else value

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw configuration data."""
        return dict(self._data)
