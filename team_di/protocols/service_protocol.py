"""
Service protocols for type safety.

These define the interfaces the team layer and the composition roots
depend on.
"""

from typing import List, Optional, Protocol, runtime_checkable

from ..models.user import User


@runtime_checkable
class UserServiceProtocol(Protocol):
    """Protocol for promoting users."""

    def promote(self, assignee_id: int) -> Optional[User]:
        """
        Promote a user to leader.

        Args:
            assignee_id: Identifier of the user to promote

        Returns:
            A promoted copy of the user, or None if the user was not found
        """
        ...


@runtime_checkable
class TeamServiceProtocol(Protocol):
    """Protocol for assembling teams."""

    def build_team(self, leader: User) -> List[Optional[User]]:
        """
        Build a team around a leader.

        Args:
            leader: User to promote as team leader

        Returns:
            Team slots, each holding a User or None
        """
        ...


__all__ = ["UserServiceProtocol", "TeamServiceProtocol"]
