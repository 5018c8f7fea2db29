"""
Pydantic models for team-di.

- base: Shared base model configuration
- user: The User record passed between layers
- settings: Validated configuration
"""

from .base import TeamDiBaseModel
from .user import User
from .settings import Settings

__all__ = [
    "TeamDiBaseModel",
    "User",
    "Settings",
]
