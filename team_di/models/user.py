"""User model."""

from typing import Optional

from pydantic import Field

from .base import TeamDiBaseModel


class User(TeamDiBaseModel):
    """
    A team member.

    Identity is ``id``. ``id`` and ``name`` are fixed once the instance is
    created; assigning to them raises ``pydantic.ValidationError``. ``role``
    may be reassigned.

    Attributes:
        id: User identifier
        name: Display name
        role: Optional role within the team (e.g. "member", "leader")
    """

    id: int = Field(frozen=True)
    name: str = Field(frozen=True)
    role: Optional[str] = None


__all__ = ["User"]
