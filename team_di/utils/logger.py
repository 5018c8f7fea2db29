"""
Logging configuration and utilities for the team-di package.

This module provides logging setup, a wrapping formatter, and logger lookup
to ensure consistent and readable logging across the package.
"""

import logging
from typing import Optional

from .constants import LOG_FORMAT

# ============================================================================
# Logging Configuration Constants
# ============================================================================

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

# ============================================================================
# Custom Formatters
# ============================================================================


class WrappingFormatter(logging.Formatter):
    """
    Formatter that wraps long log messages at a fixed width.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        """
        Initialize the wrapping formatter.

        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width for log message wrapping
        """
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if len(formatted) <= self.width:
            return formatted

        lines = []
        current_line = ""
        for word in formatted.split():
            if len(current_line + " " + word) <= self.width:
                current_line += (" " + word) if current_line else word
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word

        if current_line:
            lines.append(current_line)

        return "\n".join(lines)


# ============================================================================
# Logging Setup Functions
# ============================================================================


def verbosity_to_level(verbosity: int) -> int:
    """
    Map a verbosity count to a logging level.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)

    Returns:
        Logging level constant
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
        use_wrapping: If True, use wrapping formatter for long messages

    Example:
        >>> from team_di.utils import setup_logging
        >>> setup_logging(1)  # INFO level
    """
    level = verbosity_to_level(verbosity)

    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = [
    "WrappingFormatter",
    "verbosity_to_level",
    "setup_logging",
    "get_logger",
]
