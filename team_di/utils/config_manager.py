"""
Configuration file access.

This module loads the team-di TOML configuration file and exposes its
values by section or by dotted key.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_CONFIG_PATH

_MISSING = object()


class ConfigManager:
    """
    Loads a TOML configuration file on first access and caches the result.

    Example:
        >>> config = ConfigManager("~/.config/team-di/config.toml")
        >>> config.get("repository.name", "orakaro")
        'orakaro'
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses the default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def exists(self) -> bool:
        """Return True if the configuration file is present on disk."""
        return self.config_path.is_file()

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is not valid TOML
        """
        if self._config is not None:
            return self._config

        if not self.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def _lookup(self, key: str) -> Any:
        value: Any = self.load()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return _MISSING
            value = value[part]
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "repository.name").

        Args:
            key: Configuration key
            default: Value returned when the key is absent

        Returns:
            Configuration value or default
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Section name (e.g., "repository")

        Returns:
            Section contents, or an empty dict if the section is absent
        """
        value = self.load().get(section, {})
        return value if isinstance(value, dict) else {}

    def has_key(self, key: str) -> bool:
        """
        Check if a configuration key exists.

        A missing or unreadable file counts as having no keys.
        """
        try:
            return self._lookup(key) is not _MISSING
        except (FileNotFoundError, ValueError):
            return False

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._config = None
        self.load()


__all__ = ["ConfigManager"]
