"""
User repository implementations.

``StubUserRepository`` backs the live application and
``MockUserRepository`` backs the test wiring.
"""

import logging
from typing import Optional

from ..models.user import User
from ..utils.constants import MEMBER_ROLE, STUB_USER_NAME


class StubUserRepository:
    """
    Repository that finds every user.

    Each lookup synthesizes a new User carrying the queried id and the
    configured fixture name and role. Nothing is stored.
    """

    def __init__(self, name: str = STUB_USER_NAME, role: Optional[str] = MEMBER_ROLE) -> None:
        """
        Initialize the stub repository.

        Args:
            name: Name given to every returned user
            role: Role given to every returned user
        """
        self.name = name
        self.role = role

    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Look up a user.

        Args:
            user_id: User identifier

        Returns:
            A new User with the queried id
        """
        logging.debug("Stub lookup for user %d", user_id)
        return User(id=user_id, name=self.name, role=self.role)


class MockUserRepository:
    """Repository that never finds a user."""

    def find_by_id(self, user_id: int) -> Optional[User]:
        logging.debug("Mock lookup for user %d: not found", user_id)
        return None


__all__ = ["StubUserRepository", "MockUserRepository"]
