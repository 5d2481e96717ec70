"""Connection models and status lifecycle."""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, StrictInt, field_validator

from .base import CamelModel, UtcDatetime


class ConnectionStatus(str, Enum):
    """Connection request status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ConnectionStatus.PENDING


# Statuses a connection may move to, keyed by its current status.
ALLOWED_TRANSITIONS: dict[ConnectionStatus, frozenset[ConnectionStatus]] = {
    ConnectionStatus.PENDING: frozenset({ConnectionStatus.ACCEPTED, ConnectionStatus.REJECTED}),
    ConnectionStatus.ACCEPTED: frozenset(),
    ConnectionStatus.REJECTED: frozenset(),
}


def can_transition(current: ConnectionStatus, requested: ConnectionStatus) -> bool:
    """Return True if ``current`` may move to ``requested``."""
    return requested in ALLOWED_TRANSITIONS[current]


class ConnectionCreate(CamelModel):
    """Schema for creating a connection request."""

    from_skill_id: StrictInt
    to_skill_id: StrictInt
    message: Optional[str] = None


class ConnectionStatusUpdate(CamelModel):
    """Schema for answering a connection request."""

    status: ConnectionStatus

    @field_validator("status")
    @classmethod
    def status_must_be_decision(cls, value: ConnectionStatus) -> ConnectionStatus:
        if value is ConnectionStatus.PENDING:
            raise ValueError("status must be 'accepted' or 'rejected'")
        return value


class Connection(CamelModel):
    """Complete connection record."""

    model_config = ConfigDict(frozen=True)

    id: int
    from_skill_id: int
    to_skill_id: int
    status: ConnectionStatus = ConnectionStatus.PENDING
    message: Optional[str] = None
    created_at: UtcDatetime


class ConnectionLookup(CamelModel):
    """Result of a directional connection lookup."""

    connection: Optional[Connection] = Field(default=None)
