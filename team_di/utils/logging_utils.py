"""
Logging utilities for consistent operation logging.

This module provides standardized logging functions so every service
reports its work in the same format.
"""

import logging
from typing import Optional


def _format_details(details: dict) -> str:
    return ", ".join(f"{k}={v}" for k, v in details.items())


def log_operation_start(operation: str, **details) -> None:
    """
    Log the start of an operation with standardized format.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        logging.info("Starting %s (%s)", operation, _format_details(details))
    else:
        logging.info("Starting %s", operation)


def log_operation_complete(operation: str, **details) -> None:
    """
    Log the completion of an operation with standardized format.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        logging.info("Completed %s (%s)", operation, _format_details(details))
    else:
        logging.info("Completed %s", operation)


def format_count_with_unit(count: int, unit: str, *, singular: Optional[str] = None) -> str:
    """
    Format a count with proper pluralization.

    Args:
        count: Number to format
        unit: Unit name (will be pluralized if count != 1)
        singular: Optional explicit singular form (defaults to unit)

    Returns:
        Formatted string like "2 members" or "1 member"

    Examples:
        >>> format_count_with_unit(1, "member")
        '1 member'
        >>> format_count_with_unit(3, "member")
        '3 members'
    """
    if count == 1:
        return f"{count} {singular or unit}"

    plural = unit if unit.endswith("s") else f"{unit}s"
    return f"{count} {plural}"


__all__ = [
    "log_operation_start",
    "log_operation_complete",
    "format_count_with_unit",
]
