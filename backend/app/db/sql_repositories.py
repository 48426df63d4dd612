"""SQL implementation of the request log."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import NotesRequest
from backend.app.db.repositories import NotesRequestRecord, RequestLogError
from backend.app.models.common import Language
from backend.app.models.notes import DiamondNotes, GenerationRequest


def _to_record(row: NotesRequest) -> NotesRequestRecord:
    """Convert ORM row to domain record."""
    return NotesRequestRecord(
        request_id=row.request_id,
        class_level=row.class_level,
        subject=row.subject,
        chapter_name=row.chapter_name,
        language=Language(row.language),
        generated_notes=DiamondNotes.model_validate(row.generated_notes),
        created_at=row.created_at,
    )


class SqlNotesRequestRepository:
    """SQL implementation of NotesRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def record(self, request: GenerationRequest, notes: DiamondNotes) -> uuid.UUID:
        """Store a request and its notes."""
        request_id = uuid.uuid4()

        row = NotesRequest(
            request_id=request_id,
            class_level=request.class_level,
            subject=request.subject,
            chapter_name=request.chapter_title,
            language=request.language.value,
            generated_notes=notes.model_dump(mode="json"),
            created_at=datetime.now(timezone.utc),
        )

        try:
            self._session.add(row)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise RequestLogError(f"Failed to store notes request: {e}") from e

        return request_id

    async def list_recent(self, limit: int = 10) -> list[NotesRequestRecord]:
        """List records newest first."""
        if limit <= 0:
            return []

        try:
            result = await self._session.execute(
                select(NotesRequest)
                .order_by(NotesRequest.created_at.desc(), NotesRequest.request_id.desc())
                .limit(limit)
            )
        except SQLAlchemyError as e:
            raise RequestLogError(f"Failed to list notes requests: {e}") from e

        return [_to_record(row) for row in result.scalars().all()]

    async def get(self, request_id: uuid.UUID) -> NotesRequestRecord | None:
        """Get record by ID."""
        try:
            row = await self._session.get(NotesRequest, request_id)
        except SQLAlchemyError as e:
            raise RequestLogError(f"Failed to fetch notes request: {e}") from e

        if row is None:
            return None
        return _to_record(row)
