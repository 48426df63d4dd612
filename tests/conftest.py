"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.app.db.models import Base
from backend.app.models.common import Language
from backend.app.models.notes import GenerationRequest


@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite engine with the schema applied.

    StaticPool keeps a single connection so the in-memory database survives
    across sessions.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session bound to the SQLite engine."""
    async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def math_request() -> GenerationRequest:
    """Class 10 Mathematics request for a named chapter."""
    return GenerationRequest(
        class_level=10,
        subject="Mathematics",
        chapter_title="Linear Equations",
        language=Language.english,
    )
