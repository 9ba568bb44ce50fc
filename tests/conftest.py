"""Pytest configuration and fixtures for the content layer.

Unit tests use plain domain objects and AsyncMock collaborators.
Repository tests get an in-memory SQLite session (aiosqlite) with the
content schema created and rolled back after each test.
"""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from content.application.services.content_aggregator import ContentAggregator
from content.core.config import get_settings
from content.infrastructure.persistence import models  # noqa: F401
from content.infrastructure.persistence.database import Base


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Settings are cached per process; reset around each test so env overrides apply."""
    monkeypatch.delenv("DEFAULT_WEBSPACE", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("TEMPLATES_PATH", raising=False)
    monkeypatch.delenv("TRACING_ENABLED", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def aggregator() -> ContentAggregator:
    return ContentAggregator()


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session on a fresh in-memory database. Rolls back after test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()
