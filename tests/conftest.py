"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from skill_exchange.config import Settings
from skill_exchange.errors import StorageError
from skill_exchange.main import create_app
from skill_exchange.repositories import MemoryStorage, SqlStorage, Storage


def sqlite_url(tmp_path) -> str:
    """Throwaway SQLite database inside the test's temp directory."""
    return f"sqlite+aiosqlite:///{tmp_path / 'skills.db'}"


def make_storage(backend: str, tmp_path) -> Storage:
    if backend == "memory":
        return MemoryStorage()
    return SqlStorage(sqlite_url(tmp_path))


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the host environment."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        database_url=None,
        log_level="WARNING",
    )


@pytest_asyncio.fixture(params=["memory", "database"])
async def storage(request, tmp_path):
    """Each storage backing, connected and empty."""
    store = make_storage(request.param, tmp_path)
    await store.connect()
    yield store
    await store.disconnect()


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture(params=["memory", "database"])
def client(request, tmp_path, settings):
    """API client over each storage backing."""
    app = create_app(settings=settings, storage=make_storage(request.param, tmp_path))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice() -> dict:
    return {"name": "Alice", "canTeach": "Guitar", "wantsToLearn": "Piano"}


@pytest.fixture
def bob() -> dict:
    return {"name": "Bob", "canTeach": "Piano", "wantsToLearn": "Spanish"}


class FailingStorage(Storage):
    """Backing whose every operation fails with ``error``."""

    name = "failing"

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or StorageError("database unavailable")

    async def get_skills(self):
        raise self.error

    async def get_skill(self, skill_id):
        raise self.error

    async def create_skill(self, data):
        raise self.error

    async def get_connections(self, skill_id):
        raise self.error

    async def create_connection(self, data):
        raise self.error

    async def get_connection_status(self, from_skill_id, to_skill_id):
        raise self.error

    async def update_connection_status(self, connection_id, status):
        raise self.error


@pytest.fixture
def failing_client(settings):
    """API client whose storage reports every operation as failed."""
    app = create_app(settings=settings, storage=FailingStorage())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_client(settings):
    """API client whose storage raises an unexpected error."""
    app = create_app(settings=settings, storage=FailingStorage(RuntimeError("boom")))
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
