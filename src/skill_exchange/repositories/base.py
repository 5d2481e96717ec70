"""Storage contract shared by the memory and database backings."""

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import InvalidTransitionError
from ..models.connection import (
    Connection,
    ConnectionCreate,
    ConnectionStatus,
    can_transition,
)
from ..models.skill import Skill, SkillCreate


class SkillStore(ABC):
    """Skill listing operations."""

    @abstractmethod
    async def get_skills(self) -> list[Skill]:
        """All skills, oldest first (ties broken by id)."""

    @abstractmethod
    async def get_skill(self, skill_id: int) -> Optional[Skill]:
        """A single skill, or None."""

    @abstractmethod
    async def create_skill(self, data: SkillCreate) -> Skill:
        """Persist a new skill and return it with id and timestamp assigned."""


class ConnectionStore(ABC):
    """Connection request operations."""

    @abstractmethod
    async def get_connections(self, skill_id: int) -> list[Connection]:
        """Connections sent by ``skill_id``. Incoming requests are not included."""

    @abstractmethod
    async def create_connection(self, data: ConnectionCreate) -> Connection:
        """Persist a new pending connection.

        Raises MissingReferenceError if either skill does not exist.
        """

    @abstractmethod
    async def get_connection_status(
        self, from_skill_id: int, to_skill_id: int
    ) -> Optional[Connection]:
        """The connection for exactly this ordered pair, or None."""

    @abstractmethod
    async def update_connection_status(
        self, connection_id: int, status: ConnectionStatus
    ) -> Connection:
        """Move a pending connection to accepted or rejected.

        Raises NotFoundError for an unknown id and InvalidTransitionError
        when the connection is already decided or ``status`` is pending.
        """


class Storage(SkillStore, ConnectionStore):
    """Complete storage backing with a start/stop lifecycle."""

    name: str = "storage"

    async def connect(self) -> None:
        """Acquire resources. No-op by default."""

    async def disconnect(self) -> None:
        """Release resources. No-op by default."""


def check_transition(connection: Connection, status: ConnectionStatus) -> None:
    """Raise InvalidTransitionError unless ``connection`` may move to ``status``."""
    if not can_transition(connection.status, status):
        raise InvalidTransitionError(connection.status.value, status.value)
