"""FastAPI dependencies for the request log and the generation policy."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.config import get_settings
from backend.app.db.engine import get_async_engine
from backend.app.db.inmemory import InMemoryNotesRequestRepository
from backend.app.db.repositories import NotesRequestRepository
from backend.app.db.sql_repositories import SqlNotesRequestRepository
from backend.app.notes.generator import NotesGenerator, get_notes_generator


@lru_cache
def get_inmemory_repository() -> InMemoryNotesRequestRepository:
    """Process-wide in-memory request log."""
    return InMemoryNotesRequestRepository(max_entries=get_settings().request_log_max_entries)


async def get_notes_repository() -> AsyncGenerator[NotesRequestRepository, None]:
    """FastAPI dependency yielding the configured request log.

    Yields:
        SQL repository bound to a fresh session, or the shared in-memory one
    """
    if get_settings().request_log_backend == "sql":
        async with AsyncSession(get_async_engine(), expire_on_commit=False) as session:
            yield SqlNotesRequestRepository(session)
    else:
        yield get_inmemory_repository()


def get_generator() -> NotesGenerator:
    """FastAPI dependency for the configured generation policy."""
    return get_notes_generator()
