"""Base models for team-di."""

from pydantic import BaseModel, ConfigDict


class TeamDiBaseModel(BaseModel):
    """Base model for all team-di models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Individual fields opt in to immutability
        validate_assignment=True,  # Validate on attribute assignment
    )


__all__ = ["TeamDiBaseModel"]
