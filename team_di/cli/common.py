"""
Helpers shared by the CLI commands.
"""

import sys

import click
from pydantic import ValidationError

from ..config import load_settings
from ..models.settings import Settings
from ..utils import setup_logging
from ..utils.error_handling import handle_generic_error


def resolve_settings(ctx: click.Context) -> Settings:
    """
    Load settings for a command and configure logging.

    A non-zero ``--debug`` count overrides the configured verbosity.
    Invalid configuration is logged and exits with status 1.
    """
    config = ctx.obj["config"]
    debug = ctx.obj["debug"]

    try:
        settings = load_settings(config, use_default_path=True)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        setup_logging(debug, use_wrapping=True)
        handle_generic_error(e, "configuration loading", log_traceback=debug > 1)
        sys.exit(1)

    if debug:
        settings.verbosity = debug
    setup_logging(settings.verbosity, use_wrapping=True)
    return settings


def mock_option(func):
    """Shared --mock flag selecting the test wiring."""
    return click.option(
        "--mock",
        is_flag=True,
        help="Use the test wiring (mock repository that finds no users).",
    )(func)


__all__ = ["resolve_settings", "mock_option"]
