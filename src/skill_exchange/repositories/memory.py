"""In-process storage backed by dictionaries."""

import itertools
import logging
import threading
from typing import Optional

from ..database import utcnow
from ..errors import MissingReferenceError, NotFoundError
from ..models.connection import Connection, ConnectionCreate, ConnectionStatus
from ..models.skill import Skill, SkillCreate
from .base import Storage, check_transition

logger = logging.getLogger("memory_storage")


class MemoryStorage(Storage):
    """Ephemeral storage living for the lifetime of the process.

    Ids come from per-entity counters and are never reused. All reads and
    writes hold one lock, so the store is safe to share between the event
    loop and worker threads.
    """

    name = "memory"

    def __init__(self) -> None:
        self._skills: dict[int, Skill] = {}
        self._connections: dict[int, Connection] = {}
        self._skill_ids = itertools.count(1)
        self._connection_ids = itertools.count(1)
        self._lock = threading.Lock()

    async def get_skills(self) -> list[Skill]:
        with self._lock:
            skills = list(self._skills.values())
        return sorted(skills, key=lambda s: (s.created_at, s.id))

    async def get_skill(self, skill_id: int) -> Optional[Skill]:
        with self._lock:
            return self._skills.get(skill_id)

    async def create_skill(self, data: SkillCreate) -> Skill:
        with self._lock:
            skill = Skill(id=next(self._skill_ids), created_at=utcnow(), **data.model_dump())
            self._skills[skill.id] = skill
        logger.debug(f"Created skill {skill.id}")
        return skill

    async def get_connections(self, skill_id: int) -> list[Connection]:
        with self._lock:
            return [c for c in self._connections.values() if c.from_skill_id == skill_id]

    async def create_connection(self, data: ConnectionCreate) -> Connection:
        with self._lock:
            if data.from_skill_id not in self._skills or data.to_skill_id not in self._skills:
                raise MissingReferenceError(data.from_skill_id, data.to_skill_id)

            connection = Connection(
                id=next(self._connection_ids),
                status=ConnectionStatus.PENDING,
                created_at=utcnow(),
                **data.model_dump(),
            )
            self._connections[connection.id] = connection
        logger.debug(f"Created connection {connection.id}")
        return connection

    async def get_connection_status(
        self, from_skill_id: int, to_skill_id: int
    ) -> Optional[Connection]:
        with self._lock:
            for connection in self._connections.values():
                if (
                    connection.from_skill_id == from_skill_id
                    and connection.to_skill_id == to_skill_id
                ):
                    return connection
        return None

    async def update_connection_status(
        self, connection_id: int, status: ConnectionStatus
    ) -> Connection:
        with self._lock:
            current = self._connections.get(connection_id)
            if current is None:
                raise NotFoundError("Connection", connection_id)
            check_transition(current, status)

            updated = current.model_copy(update={"status": status})
            self._connections[connection_id] = updated
        return updated
