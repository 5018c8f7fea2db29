"""
Unified CLI entry point for team-di using Click.

This module provides the main CLI group and registers the subcommands.
"""

import sys
from typing import Optional

import click

from . import demo, promote
from .._version import __version__


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="team-di")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (default: ~/.config/team-di/config.toml, if present)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """Team DI - Promote users and build teams through injected services."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


cli.add_command(demo.demo)
cli.add_command(promote.promote)
cli.add_command(promote.build_team)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
