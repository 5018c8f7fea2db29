"""
Utility modules for team-di.
"""

from .logger import setup_logging, WrappingFormatter, get_logger
from .config_manager import ConfigManager

from . import constants
from . import error_handling
from . import logging_utils

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "ConfigManager",
    "constants",
    "error_handling",
    "logging_utils",
]
