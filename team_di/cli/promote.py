import logging
from typing import Optional

import click
from pydantic import ValidationError

from ..container import Application, build_live_application, build_test_application
from ..models.settings import Settings
from ..models.user import User
from ..utils.constants import MEMBER_ROLE, STUB_USER_NAME
from ..utils.error_handling import log_and_exit
from .common import mock_option, resolve_settings


def _application(settings: Settings, mock: bool) -> Application:
    if mock:
        return build_test_application()
    return build_live_application(settings)


@click.command()
@click.option("--id", "assignee_id", type=int, required=True, help="Identifier of the user to promote.")
@mock_option
@click.pass_context
def promote(ctx: click.Context, assignee_id: int, mock: bool) -> None:
    """
    Promote a user to leader and print the result (None if not found).
    """
    settings = resolve_settings(ctx)
    app = _application(settings, mock)
    click.echo(repr(app.promote(assignee_id)))


@click.command(name="build-team")
@click.option("--leader-id", type=int, required=True, help="Identifier of the team leader.")
@click.option("--leader-name", default=STUB_USER_NAME, show_default=True, help="Name of the team leader.")
@click.option("--leader-role", default=MEMBER_ROLE, show_default=True, help="Current role of the team leader.")
@mock_option
@click.pass_context
def build_team(
    ctx: click.Context, leader_id: int, leader_name: str, leader_role: Optional[str], mock: bool
) -> None:
    """
    Build a team around a leader and print the team.
    """
    settings = resolve_settings(ctx)

    try:
        leader = User(id=leader_id, name=leader_name, role=leader_role)
    except ValidationError as e:
        for error in e.errors():
            logging.error("%s-%s: %s", e.title, error["loc"][0], error["msg"])
        log_and_exit("Unable to validate leader options")

    app = _application(settings, mock)
    click.echo(repr(app.build_team(leader)))


__all__ = ["promote", "build_team"]
