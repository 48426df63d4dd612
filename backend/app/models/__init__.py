"""Models package - re-exports for convenience."""

from backend.app.models.common import ContentCategory, Language
from backend.app.models.notes import DiamondNotes, GenerationRequest, NotesHeading

__all__ = [
    # Common
    "ContentCategory",
    "Language",
    # Notes
    "GenerationRequest",
    "NotesHeading",
    "DiamondNotes",
]
