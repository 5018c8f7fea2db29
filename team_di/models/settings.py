"""Settings model built from the configuration file."""

from typing import Optional

from pydantic import Field

from .base import TeamDiBaseModel
from ..utils.constants import MEMBER_ROLE, STUB_USER_NAME


class Settings(TeamDiBaseModel):
    """
    Validated runtime settings.

    Attributes:
        stub_name: Name returned by the live stub repository
        stub_role: Role returned by the live stub repository
        verbosity: Logging verbosity (0=WARNING, 1=INFO, 2+=DEBUG)
    """

    stub_name: str = STUB_USER_NAME
    stub_role: Optional[str] = MEMBER_ROLE
    verbosity: int = Field(default=0, ge=0)


__all__ = ["Settings"]
