"""
Settings loading.

This module turns the optional TOML configuration file into a validated
``Settings`` model.
"""

import logging
from typing import Optional

from .models.settings import Settings
from .utils.config_manager import ConfigManager
from .utils.constants import LOGGING_SECTION, REPOSITORY_SECTION


def load_settings(config_path: Optional[str] = None, *, use_default_path: bool = False) -> Settings:
    """
    Build settings from a configuration file.

    Recognized keys::

        [repository]
        name = "orakaro"
        role = "member"

        [logging]
        verbosity = 1

    Args:
        config_path: Path to a TOML configuration file, or None
        use_default_path: When no path is given, read the default config
            file if it exists

    Returns:
        Settings populated from the file, with defaults for missing keys

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the file is not valid TOML
        pydantic.ValidationError: If a configured value has the wrong type
    """
    if config_path is None:
        if not use_default_path:
            return Settings()
        manager = ConfigManager()
        if not manager.exists():
            logging.debug("No configuration file at %s, using defaults", manager.config_path)
            return Settings()
    else:
        manager = ConfigManager(config_path)

    repository = manager.get_section(REPOSITORY_SECTION)
    values = {}
    if "name" in repository:
        values["stub_name"] = repository["name"]
    if "role" in repository:
        values["stub_role"] = repository["role"]
    if manager.has_key(f"{LOGGING_SECTION}.verbosity"):
        values["verbosity"] = manager.get(f"{LOGGING_SECTION}.verbosity")

    settings = Settings(**values)
    logging.debug("Loaded settings from %s: %s", manager.config_path, settings)
    return settings


__all__ = ["load_settings"]
