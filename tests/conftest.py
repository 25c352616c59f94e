import asyncio
import os
from pathlib import Path
from typing import Any, AsyncGenerator, Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

# The app module creates its engine on import; tests never connect through it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./contest-test.db")
os.environ["DB_AUTO_CREATE"] = "false"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool  # noqa: E402

from contest.database import Base, get_db  # noqa: E402
from contest.main import app  # noqa: E402
from contest.models.api.participants import RegisterParticipantRequest  # noqa: E402


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


async def _create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(scope="function")
async def test_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a throwaway SQLite database with all tables for one test."""
    engine = create_async_engine(
        _sqlite_url(tmp_path / "contest.db"), poolclass=NullPool, future=True
    )
    await _create_tables(engine)

    yield engine

    # Clean up
    await engine.dispose()


@pytest.fixture(scope="function")
async def test_db(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the throwaway database."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def mock_db() -> Generator[AsyncMock, None, None]:
    """Create a mock database session for unit tests."""
    mock_session = AsyncMock()
    mock_session.commit = AsyncMock()
    mock_session.rollback = AsyncMock()
    mock_session.close = AsyncMock()
    mock_session.refresh = AsyncMock()
    mock_session.execute = AsyncMock()
    mock_session.delete = AsyncMock()
    mock_session.add = MagicMock()  # add is sync, not async

    yield mock_session


@pytest.fixture
def client(tmp_path: Path) -> Generator[TestClient, Any, None]:
    """Create a test client whose requests use a throwaway SQLite database."""
    engine = create_async_engine(
        _sqlite_url(tmp_path / "api.db"), poolclass=NullPool, future=True
    )
    asyncio.run(_create_tables(engine))
    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
        asyncio.run(engine.dispose())


@pytest.fixture
def make_registration() -> Callable[..., RegisterParticipantRequest]:
    """Build registration requests with sensible defaults."""

    def _make(**overrides: Any) -> RegisterParticipantRequest:
        data = {
            "name": "Alice",
            "email": "a@x.com",
            "phone": "555",
            "company": "Acme",
        }
        data.update(overrides)
        return RegisterParticipantRequest(**data)

    return _make


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict]:
    """Register a participant through the API and return the JSON body."""

    def _register(**overrides: Any) -> dict:
        payload = {
            "name": "Alice",
            "email": "a@x.com",
            "phone": "555",
            "company": "Acme",
        }
        payload.update(overrides)
        response = client.post("/api/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register
