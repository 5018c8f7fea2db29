"""
Team service for assembling teams.

This module provides the service layer that builds a team around a
leader, delegating promotion to an injected user service.
"""

from typing import List, Optional

from ..models.user import User
from ..protocols.service_protocol import UserServiceProtocol
from ..utils.logging_utils import format_count_with_unit, log_operation_complete, log_operation_start


class TeamService:
    """
    Service that builds teams.

    A team currently holds a single slot: the promoted leader, or None when
    the leader could not be found.
    """

    def __init__(self, user_service: UserServiceProtocol) -> None:
        """
        Initialize the team service.

        Args:
            user_service: Service used to promote the leader
        """
        self.user_service = user_service

    def build_team(self, leader: User) -> List[Optional[User]]:
        """
        Build a team around a leader.

        Args:
            leader: User to promote as team leader

        Returns:
            One-element list holding the promoted leader or None
        """
        log_operation_start("team build", leader_id=leader.id)
        team = [self.user_service.promote(leader.id)]
        found = sum(1 for member in team if member is not None)
        log_operation_complete("team build", members=format_count_with_unit(found, "member"))
        return team


__all__ = ["TeamService"]
