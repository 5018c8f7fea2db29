"""
Repository protocol for type safety.

This module defines the lookup interface the service layer depends on.
"""

from typing import Optional, Protocol, runtime_checkable

from ..models.user import User


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """
    Protocol defining the interface for user lookup.

    Implementations satisfy it structurally; no inheritance is required.
    """

    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Resolve a user identifier to a user record.

        Args:
            user_id: User identifier

        Returns:
            The matching User, or None when there is no match
        """
        ...


__all__ = ["UserRepositoryProtocol"]
