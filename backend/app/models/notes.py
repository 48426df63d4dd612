"""Diamond Notes domain models."""

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.common import Language


class GenerationRequest(BaseModel):
    """Inbound request for a set of study notes.

    The caller-facing boundary guarantees that at least one of chapter_title
    and source_document is present.
    """

    class_level: int = Field(..., ge=1, le=12, description="School class (1-12)")
    subject: str = Field(..., min_length=1, description="Free-text subject name")
    chapter_title: str | None = Field(None, min_length=1, description="Chapter name")
    source_document: bytes | None = Field(None, repr=False, exclude=True)
    language: Language = Language.english

    @property
    def has_source_document(self) -> bool:
        """True when an uploaded document accompanies the request."""
        return bool(self.source_document)


class NotesHeading(BaseModel):
    """Single numbered heading with its bullet points."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="1-based position in the document")
    title: str
    bullet_points: list[str] = Field(default_factory=list)


class DiamondNotes(BaseModel):
    """Structured study notes returned to the caller."""

    model_config = ConfigDict(frozen=True)

    chapter_title: str
    headings: list[NotesHeading]
    conclusion: str
    keywords: list[str] = Field(default_factory=list)
