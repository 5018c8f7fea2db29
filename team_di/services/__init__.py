"""
Service layer for team-di.

Each service receives the capability it depends on through its constructor.
"""

from .team_service import TeamService
from .user_service import UserService

__all__ = [
    "UserService",
    "TeamService",
]
