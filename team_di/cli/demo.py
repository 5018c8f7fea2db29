import click

from ..container import run_demo
from .common import resolve_settings


@click.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """
    Run the live and test wiring once each and print the results.
    """
    settings = resolve_settings(ctx)
    run_demo(click.echo, settings)


__all__ = ["demo"]
