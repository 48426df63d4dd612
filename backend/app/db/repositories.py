"""Repository protocol interfaces for data access."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from backend.app.models.common import Language
from backend.app.models.notes import DiamondNotes, GenerationRequest


class RequestLogError(RuntimeError):
    """Raised when the request log cannot store or read a record."""


@dataclass(frozen=True)
class NotesRequestRecord:
    """Stored notes request with its generated notes.

    Uploaded document bytes are never retained.
    """

    request_id: UUID
    class_level: int
    subject: str
    chapter_name: str | None
    language: Language
    generated_notes: DiamondNotes
    created_at: datetime


class NotesRequestRepository(Protocol):
    """Repository for the notes request log."""

    async def record(self, request: GenerationRequest, notes: DiamondNotes) -> UUID:
        """Store a request and the notes generated for it.

        Args:
            request: Accepted generation request
            notes: Notes produced for the request

        Returns:
            Request ID

        Raises:
            RequestLogError: If the record cannot be stored
        """
        ...

    async def list_recent(self, limit: int = 10) -> list[NotesRequestRecord]:
        """List the most recent records, newest first.

        Args:
            limit: Maximum number of records

        Returns:
            At most ``limit`` records ordered by creation time descending
        """
        ...

    async def get(self, request_id: UUID) -> NotesRequestRecord | None:
        """Get a record by ID.

        Args:
            request_id: Request ID

        Returns:
            Record or None if not found
        """
        ...
