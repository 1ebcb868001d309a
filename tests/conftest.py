"""Pytest configuration and fixtures for the codelists service.

Every DB-backed test gets its own SQLite file (aiosqlite) under tmp_path:
DATABASE_URL is pointed at it, the settings cache is cleared and the lazy
engine in codelists.infrastructure.persistence.database is reset, so the
app, repositories and the audit recorder all share that database.
"""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from codelists.core.config import get_settings
from codelists.infrastructure.persistence import models  # noqa: F401  (registers tables)
from codelists.infrastructure.persistence.database import (
    Base,
    create_engine_for,
    dispose_engine,
    get_session_factory,
)
from codelists.main import app


@pytest.fixture
async def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[str]:
    """Fresh SQLite database with all tables created; engine reset around the test."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'codelists.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    await dispose_engine()

    engine = create_engine_for(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

    yield url

    await dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def session_factory(database_url: str) -> async_sessionmaker[AsyncSession]:
    return get_session_factory()


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session for repository/integration tests. The database file is discarded after the test."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(database_url: str) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) backed by the test database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
