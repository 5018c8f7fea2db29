"""
Team DI - protocol-oriented dependency injection.

This package wires a user repository, a promotion service and a team
service together through constructor injection, with live and test
composition roots sharing the same service code.
"""

from ._version import __version__

from .models import User, Settings
from .protocols import UserRepositoryProtocol, UserServiceProtocol, TeamServiceProtocol
from .repositories import StubUserRepository, MockUserRepository
from .services import UserService, TeamService
from .container import Application, build_live_application, build_test_application, run_demo
from .config import load_settings
from .utils import setup_logging, get_logger
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "User",
    "Settings",
    "UserRepositoryProtocol",
    "UserServiceProtocol",
    "TeamServiceProtocol",
    "StubUserRepository",
    "MockUserRepository",
    "UserService",
    "TeamService",
    "Application",
    "build_live_application",
    "build_test_application",
    "run_demo",
    "load_settings",
    "setup_logging",
    "get_logger",
    "cli_main",
    "cli_group",
]
