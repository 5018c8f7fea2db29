"""
Composition roots.

This module chooses concrete implementations for each capability and
wires them together: the live application uses the stub repository, the
test application uses the mock repository. Service code is identical in
both graphs.
"""

import logging
from typing import Callable, List, Optional, Tuple

from .models.settings import Settings
from .models.user import User
from .protocols import TeamServiceProtocol, UserRepositoryProtocol, UserServiceProtocol
from .repositories import MockUserRepository, StubUserRepository
from .services import TeamService, UserService
from .utils.constants import DEMO_LEADER_ID, MEMBER_ROLE, STUB_USER_NAME


class Application:
    """
    A wired dependency graph: team service, user service, repository.

    Attributes:
        user_repository: Repository at the bottom of the graph
        user_service: Promotion service using user_repository
        team_service: Team service using user_service
    """

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository
        self.user_service: UserServiceProtocol = UserService(user_repository)
        self.team_service: TeamServiceProtocol = TeamService(self.user_service)

    def promote(self, assignee_id: int) -> Optional[User]:
        return self.user_service.promote(assignee_id)

    def build_team(self, leader: User) -> List[Optional[User]]:
        return self.team_service.build_team(leader)


def build_live_application(settings: Optional[Settings] = None) -> Application:
    """
    Wire the live graph on top of the stub repository.

    Args:
        settings: Optional settings supplying the stub fixture values

    Returns:
        Application backed by StubUserRepository
    """
    if settings is None:
        settings = Settings()
    logging.debug("Wiring live application (stub name=%s, role=%s)", settings.stub_name, settings.stub_role)
    return Application(StubUserRepository(name=settings.stub_name, role=settings.stub_role))


def build_test_application() -> Application:
    """Wire the test graph on top of the mock repository."""
    logging.debug("Wiring test application")
    return Application(MockUserRepository())


def demo_leader() -> User:
    """Leader used by the demonstration run."""
    return User(id=DEMO_LEADER_ID, name=STUB_USER_NAME, role=MEMBER_ROLE)


def run_demo(
    echo: Callable[[str], None] = print, settings: Optional[Settings] = None
) -> Tuple[List[Optional[User]], Optional[User], List[Optional[User]]]:
    """
    Exercise both composition roots once and print each result.

    Runs, in order: the live team build, the test promotion and the test
    team build.

    Args:
        echo: Callable receiving each printed line
        settings: Optional settings for the live graph

    Returns:
        Tuple of (live team, test promotion, test team)
    """
    live = build_live_application(settings)
    team = live.build_team(demo_leader())
    echo(repr(team))

    test = build_test_application()
    promoted = test.promote(DEMO_LEADER_ID)
    echo(repr(promoted))

    test_team = test.build_team(demo_leader())
    echo(repr(test_team))

    return team, promoted, test_team


__all__ = [
    "Application",
    "build_live_application",
    "build_test_application",
    "demo_leader",
    "run_demo",
]
