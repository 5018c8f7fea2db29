"""
User service for promotion.

This module provides the service layer that promotes users, delegating
lookups to an injected repository.
"""

import logging
from typing import Optional

from ..models.user import User
from ..protocols.repository_protocol import UserRepositoryProtocol
from ..utils.constants import LEADER_ROLE


class UserService:
    """
    Service that promotes users.

    The repository is injected at construction, so the same promotion logic
    runs against the live stub or against a mock.
    """

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """
        Initialize the user service.

        Args:
            user_repository: Repository used to look up users
        """
        self.user_repository = user_repository

    def promote(self, assignee_id: int) -> Optional[User]:
        """
        Promote a user to leader.

        The looked-up record is never modified; the returned value is a copy
        with its role replaced.

        Args:
            assignee_id: Identifier of the user to promote

        Returns:
            Promoted copy of the user, or None if the user was not found
        """
        assignee = self.user_repository.find_by_id(assignee_id)
        if assignee is None:
            logging.info("User %d not found, nothing to promote", assignee_id)
            return None

        promoted = assignee.model_copy()
        promoted.role = LEADER_ROLE
        logging.debug("Promoted user %d from %s to %s", promoted.id, assignee.role, promoted.role)
        return promoted


__all__ = ["UserService"]
