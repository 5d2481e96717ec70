"""Relational storage on SQLAlchemy's asyncio engine."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ..database import (
    ConnectionRow,
    SkillRow,
    create_engine,
    create_session_factory,
    create_tables,
    mask_url,
)
from ..errors import MissingReferenceError, NotFoundError, StorageError
from ..models.connection import Connection, ConnectionCreate, ConnectionStatus
from ..models.skill import Skill, SkillCreate
from .base import Storage, check_transition

logger = logging.getLogger("sql_storage")


class SqlStorage(Storage):
    """Storage backed by a relational database.

    Each operation runs in its own session and commits once. Referential
    integrity of connections is left to the database's foreign keys.
    """

    name = "database"

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 10,
        echo: bool = False,
    ) -> None:
        self._url = url
        self._engine_options = {
            "pool_size": pool_size,
            "max_overflow": max_overflow,
            "pool_timeout": pool_timeout,
            "echo": echo,
        }
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    async def connect(self) -> None:
        """Create the engine and any missing tables."""
        if self._engine:
            return

        logger.info(f"Connecting to database {mask_url(self._url)}")
        self._engine = create_engine(self._url, **self._engine_options)
        self._session_factory = create_session_factory(self._engine)
        try:
            await create_tables(self._engine)
        except (SQLAlchemyError, OSError) as e:
            await self.disconnect()
            raise StorageError(f"Database unavailable: {e}") from e

    async def disconnect(self) -> None:
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection closed")

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on success and rolls back on any error."""
        if not self._session_factory:
            raise StorageError("Database not connected. Call connect() first.")

        try:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database operation failed: {e}")
            raise StorageError(str(e)) from e

    async def get_skills(self) -> list[Skill]:
        async with self._session() as session:
            result = await session.scalars(
                select(SkillRow).order_by(SkillRow.created_at, SkillRow.id)
            )
            return [Skill.model_validate(row) for row in result]

    async def get_skill(self, skill_id: int) -> Optional[Skill]:
        async with self._session() as session:
            row = await session.get(SkillRow, skill_id)
            return Skill.model_validate(row) if row else None

    async def create_skill(self, data: SkillCreate) -> Skill:
        async with self._session() as session:
            row = SkillRow(**data.model_dump())
            session.add(row)
            await session.flush()
            skill = Skill.model_validate(row)
        logger.debug(f"Created skill {skill.id}")
        return skill

    async def get_connections(self, skill_id: int) -> list[Connection]:
        async with self._session() as session:
            result = await session.scalars(
                select(ConnectionRow)
                .where(ConnectionRow.from_skill_id == skill_id)
                .order_by(ConnectionRow.id)
            )
            return [Connection.model_validate(row) for row in result]

    async def create_connection(self, data: ConnectionCreate) -> Connection:
        async with self._session() as session:
            row = ConnectionRow(status=ConnectionStatus.PENDING.value, **data.model_dump())
            session.add(row)
            try:
                await session.flush()
            except IntegrityError as e:
                logger.warning(f"Rejected connection with dangling reference: {e.orig}")
                raise MissingReferenceError(data.from_skill_id, data.to_skill_id) from e
            connection = Connection.model_validate(row)
        logger.debug(f"Created connection {connection.id}")
        return connection

    async def get_connection_status(
        self, from_skill_id: int, to_skill_id: int
    ) -> Optional[Connection]:
        async with self._session() as session:
            row = await session.scalar(
                select(ConnectionRow)
                .where(
                    ConnectionRow.from_skill_id == from_skill_id,
                    ConnectionRow.to_skill_id == to_skill_id,
                )
                .order_by(ConnectionRow.id)
                .limit(1)
            )
            return Connection.model_validate(row) if row else None

    async def update_connection_status(
        self, connection_id: int, status: ConnectionStatus
    ) -> Connection:
        async with self._session() as session:
            row = await session.get(ConnectionRow, connection_id, with_for_update=True)
            if row is None:
                raise NotFoundError("Connection", connection_id)
            check_transition(Connection.model_validate(row), status)

            row.status = status.value
            await session.flush()
            return Connection.model_validate(row)
