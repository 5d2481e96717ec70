"""Pydantic models for skills and connections."""

from .skill import Skill, SkillCreate
from .connection import (
    Connection,
    ConnectionCreate,
    ConnectionLookup,
    ConnectionStatus,
    ConnectionStatusUpdate,
    can_transition,
)

__all__ = [
    "Skill",
    "SkillCreate",
    "Connection",
    "ConnectionCreate",
    "ConnectionLookup",
    "ConnectionStatus",
    "ConnectionStatusUpdate",
    "can_transition",
]
