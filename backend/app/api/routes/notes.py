"""Notes endpoints - POST /api/generate-notes, GET /api/recent-notes, GET /api/notes/{id}."""

import logging
import uuid
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from backend.app.api.deps import get_generator, get_notes_repository
from backend.app.config import get_settings
from backend.app.db.repositories import NotesRequestRecord, NotesRequestRepository, RequestLogError
from backend.app.models.common import Language
from backend.app.models.notes import DiamondNotes, GenerationRequest
from backend.app.notes.export import export_filename, render_notes_text
from backend.app.notes.generator import NotesGenerator
from backend.app.subjects import subjects_for_class
from backend.app.utils.metrics import PrometheusGenerationMetrics

router = APIRouter(prefix="/api", tags=["notes"])
logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class GenerateNotesResponse(BaseModel):
    """Response for POST /api/generate-notes."""

    id: str
    notes: DiamondNotes


class NotesRequestResponse(BaseModel):
    """Stored notes request as returned by the read endpoints."""

    id: str
    class_level: int
    subject: str
    chapter_name: str | None
    language: Language
    generated_notes: DiamondNotes
    created_at: datetime


class SubjectsResponse(BaseModel):
    """Response for GET /api/subjects."""

    class_level: int
    subjects: list[str]


def _to_response(record: NotesRequestRecord) -> NotesRequestResponse:
    return NotesRequestResponse(
        id=str(record.request_id),
        class_level=record.class_level,
        subject=record.subject,
        chapter_name=record.chapter_name,
        language=record.language,
        generated_notes=record.generated_notes,
        created_at=record.created_at,
    )


def _parse_request_id(request_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(request_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid notes id format (expected UUID)",
        ) from e


async def _load_record(
    request_id: str, repository: NotesRequestRepository
) -> NotesRequestRecord:
    record_id = _parse_request_id(request_id)

    try:
        record = await repository.get(record_id)
    except RequestLogError as e:
        logger.error(f"[GET /api/notes/{request_id}] request log read failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch notes",
        ) from e

    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notes not found")
    return record


@router.post("/generate-notes", response_model=GenerateNotesResponse)
async def generate_notes(
    class_level: Annotated[int, Form(ge=1, le=12)],
    subject: Annotated[str, Form(min_length=1)],
    repository: Annotated[NotesRequestRepository, Depends(get_notes_repository)],
    generator: Annotated[NotesGenerator, Depends(get_generator)],
    chapter_name: Annotated[str | None, Form()] = None,
    language: Annotated[Language, Form()] = Language.english,
    pdf: Annotated[UploadFile | None, File()] = None,
) -> GenerateNotesResponse:
    """Generate Diamond Notes from a chapter name or an uploaded PDF.

    Args:
        class_level: School class (1-12)
        subject: Subject name
        repository: Request log
        generator: Configured generation policy
        chapter_name: Optional chapter name
        language: Output language
        pdf: Optional PDF upload

    Returns:
        Request ID and the generated notes

    Raises:
        HTTPException: 400 for missing or invalid input, 413 for oversized
            uploads, 500 if generation or the request log fails
    """
    settings = get_settings()

    subject = subject.strip()
    if not subject:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Subject is required")

    source_document: bytes | None = None
    if pdf is not None:
        if pdf.content_type != PDF_CONTENT_TYPE:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only PDF files are allowed",
            )
        too_large = HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"PDF exceeds the {settings.max_upload_bytes} byte upload limit",
        )
        if pdf.size is not None and pdf.size > settings.max_upload_bytes:
            raise too_large
        # Read at most one byte past the limit
        source_document = await pdf.read(settings.max_upload_bytes + 1)
        if len(source_document) > settings.max_upload_bytes:
            raise too_large

    chapter_title = chapter_name.strip() if chapter_name else None
    if not chapter_title and not source_document:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Either chapter name or PDF content is required",
        )

    request = GenerationRequest(
        class_level=class_level,
        subject=subject,
        chapter_title=chapter_title or None,
        source_document=source_document or None,
        language=language,
    )

    logger.info(
        f"[POST /api/generate-notes] class={class_level}, subject={subject}, "
        f"language={language.value}, pdf={request.has_source_document}"
    )

    try:
        notes = await generator.generate(request)
    except Exception as e:
        logger.error(f"[POST /api/generate-notes] generation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate notes. Please try again.",
        ) from e

    try:
        request_id = await repository.record(request, notes)
    except RequestLogError as e:
        logger.error(f"[POST /api/generate-notes] request log write failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Notes were generated but could not be saved",
        ) from e

    PrometheusGenerationMetrics().inc_recorded(settings.request_log_backend)
    logger.info(f"[POST /api/generate-notes] id={request_id}, {len(notes.headings)} headings")

    return GenerateNotesResponse(id=str(request_id), notes=notes)


@router.get("/recent-notes", response_model=list[NotesRequestResponse])
async def recent_notes(
    repository: Annotated[NotesRequestRepository, Depends(get_notes_repository)],
    limit: Annotated[int | None, Query(ge=1, le=50)] = None,
) -> list[NotesRequestResponse]:
    """List the most recent notes requests, newest first."""
    if limit is None:
        limit = get_settings().recent_notes_limit

    try:
        records = await repository.list_recent(limit)
    except RequestLogError as e:
        logger.error(f"[GET /api/recent-notes] request log read failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recent notes",
        ) from e

    return [_to_response(record) for record in records]


@router.get("/notes/{request_id}", response_model=NotesRequestResponse)
async def get_notes(
    request_id: str,
    repository: Annotated[NotesRequestRepository, Depends(get_notes_repository)],
) -> NotesRequestResponse:
    """Retrieve a stored notes request.

    Raises:
        HTTPException: 400 for a malformed id, 404 if not found
    """
    record = await _load_record(request_id, repository)
    return _to_response(record)


@router.get("/notes/{request_id}/export", response_class=PlainTextResponse)
async def export_notes(
    request_id: str,
    repository: Annotated[NotesRequestRepository, Depends(get_notes_repository)],
) -> PlainTextResponse:
    """Download stored notes as a plain-text file."""
    record = await _load_record(request_id, repository)
    notes = record.generated_notes

    return PlainTextResponse(
        content=render_notes_text(notes),
        headers={"Content-Disposition": f'attachment; filename="{export_filename(notes)}"'},
    )


@router.get("/subjects", response_model=SubjectsResponse)
async def list_subjects(
    class_level: Annotated[int, Query(ge=1, le=12)],
) -> SubjectsResponse:
    """List the subjects offered for a class level."""
    return SubjectsResponse(class_level=class_level, subjects=subjects_for_class(class_level))
