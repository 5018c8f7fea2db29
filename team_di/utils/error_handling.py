"""
Error handling utilities for standardized error logging and handling.
"""

import logging
import sys
import traceback


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def log_and_exit(message: str, exit_code: int = 1) -> None:
    """
    Log an error message and exit the program.

    Args:
        message: Error message to log
        exit_code: Exit code (default: 1)
    """
    logging.error(message)
    sys.exit(exit_code)


__all__ = [
    "handle_generic_error",
    "log_and_exit",
]
