"""In-memory implementation of the request log."""

import itertools
import uuid
from datetime import datetime, timezone

from backend.app.db.repositories import NotesRequestRecord
from backend.app.models.notes import DiamondNotes, GenerationRequest


class InMemoryNotesRequestRepository:
    """In-memory implementation of NotesRequestRepository."""

    def __init__(self, max_entries: int | None = None) -> None:
        """Initialize repository.

        Args:
            max_entries: Optional cap; the oldest record is evicted past it
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self._max_entries = max_entries
        self._records: dict[uuid.UUID, tuple[int, NotesRequestRecord]] = {}
        self._sequence = itertools.count()

    async def record(self, request: GenerationRequest, notes: DiamondNotes) -> uuid.UUID:
        """Store a request and its notes."""
        request_id = uuid.uuid4()

        record = NotesRequestRecord(
            request_id=request_id,
            class_level=request.class_level,
            subject=request.subject,
            chapter_name=request.chapter_title,
            language=request.language,
            generated_notes=notes,
            created_at=datetime.now(timezone.utc),
        )
        self._records[request_id] = (next(self._sequence), record)

        # dicts keep insertion order, so the first key is the oldest
        if self._max_entries is not None and len(self._records) > self._max_entries:
            oldest_id = next(iter(self._records))
            del self._records[oldest_id]

        return request_id

    async def list_recent(self, limit: int = 10) -> list[NotesRequestRecord]:
        """List records newest first; insertion order breaks timestamp ties."""
        if limit <= 0:
            return []

        ordered = sorted(
            self._records.values(),
            key=lambda entry: (entry[1].created_at, entry[0]),
            reverse=True,
        )
        return [record for _, record in ordered[:limit]]

    async def get(self, request_id: uuid.UUID) -> NotesRequestRecord | None:
        """Get record by ID."""
        entry = self._records.get(request_id)
        if entry is None:
            return None
        return entry[1]

    def __len__(self) -> int:
        return len(self._records)
