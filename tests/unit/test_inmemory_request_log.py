"""Tests for the in-memory request log."""

import uuid

import pytest

from backend.app.db.inmemory import InMemoryNotesRequestRepository
from backend.app.models.common import Language
from backend.app.models.notes import GenerationRequest
from backend.app.notes.generator import build_template_notes


def _request(chapter: str) -> GenerationRequest:
    return GenerationRequest(
        class_level=7,
        subject="Science",
        chapter_title=chapter,
        language=Language.english,
    )


@pytest.mark.asyncio
async def test_record_and_get_round_trip() -> None:
    """Test that a recorded request can be fetched by its ID."""
    repo = InMemoryNotesRequestRepository()
    request = _request("Nutrition in Plants")
    notes = build_template_notes(request)

    request_id = await repo.record(request, notes)
    record = await repo.get(request_id)

    assert record is not None
    assert record.request_id == request_id
    assert record.class_level == 7
    assert record.subject == "Science"
    assert record.chapter_name == "Nutrition in Plants"
    assert record.language == Language.english
    assert record.generated_notes == notes
    assert record.created_at is not None


@pytest.mark.asyncio
async def test_get_unknown_id_returns_none() -> None:
    """Test lookup of an ID that was never recorded."""
    repo = InMemoryNotesRequestRepository()

    assert await repo.get(uuid.uuid4()) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(("recorded", "limit"), [(0, 5), (3, 5), (5, 5), (8, 5), (8, 1)])
async def test_list_recent_returns_min_of_count_and_limit(recorded: int, limit: int) -> None:
    """Test that list_recent returns min(N, k) records, newest first."""
    repo = InMemoryNotesRequestRepository()
    ids = []
    for i in range(recorded):
        request = _request(f"Chapter {i}")
        ids.append(await repo.record(request, build_template_notes(request)))

    records = await repo.list_recent(limit)

    assert len(records) == min(recorded, limit)
    assert [r.request_id for r in records] == list(reversed(ids))[:limit]
    created = [r.created_at for r in records]
    assert created == sorted(created, reverse=True)


@pytest.mark.asyncio
async def test_list_recent_with_non_positive_limit_is_empty() -> None:
    """Test that a zero limit returns nothing."""
    repo = InMemoryNotesRequestRepository()
    request = _request("Chapter")
    await repo.record(request, build_template_notes(request))

    assert await repo.list_recent(0) == []


@pytest.mark.asyncio
async def test_ids_are_unique() -> None:
    """Test that every record gets its own identifier."""
    repo = InMemoryNotesRequestRepository()
    request = _request("Same chapter")
    notes = build_template_notes(request)

    ids = {await repo.record(request, notes) for _ in range(50)}

    assert len(ids) == 50


@pytest.mark.asyncio
async def test_max_entries_evicts_oldest() -> None:
    """Test that the optional cap drops the oldest record."""
    repo = InMemoryNotesRequestRepository(max_entries=2)
    ids = []
    for i in range(3):
        request = _request(f"Chapter {i}")
        ids.append(await repo.record(request, build_template_notes(request)))

    assert len(repo) == 2
    assert await repo.get(ids[0]) is None
    assert [r.request_id for r in await repo.list_recent(10)] == [ids[2], ids[1]]


def test_max_entries_must_be_positive() -> None:
    """Test rejection of a non-positive cap."""
    with pytest.raises(ValueError):
        InMemoryNotesRequestRepository(max_entries=0)


@pytest.mark.asyncio
async def test_source_document_is_not_retained() -> None:
    """Test that uploaded bytes are dropped from the stored record."""
    repo = InMemoryNotesRequestRepository()
    request = GenerationRequest(
        class_level=9,
        subject="Physics",
        source_document=b"%PDF-1.4 body",
        language=Language.english,
    )

    request_id = await repo.record(request, build_template_notes(request))
    record = await repo.get(request_id)

    assert record is not None
    assert record.chapter_name is None
    assert not hasattr(record, "source_document")
