"""Skill models."""

from pydantic import ConfigDict, Field

from .base import CamelModel, UtcDatetime


class SkillBase(CamelModel):
    """Base skill attributes."""

    name: str = Field(..., min_length=1)
    can_teach: str = Field(..., min_length=1)
    wants_to_learn: str = Field(..., min_length=1)


class SkillCreate(SkillBase):
    """Schema for creating a skill. Server-assigned fields are ignored."""

    pass


class Skill(SkillBase):
    """Complete skill record."""

    model_config = ConfigDict(frozen=True)

    id: int
    created_at: UtcDatetime
