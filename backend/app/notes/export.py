"""Plain-text rendering of notes for copy and download."""

import re

from backend.app.models.notes import DiamondNotes

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def render_notes_text(notes: DiamondNotes) -> str:
    """Render notes as the plain-text study sheet."""
    text = f"📚 {notes.chapter_title}\n\n"

    for heading in notes.headings:
        text += f"{heading.number}. {heading.title}\n"
        for point in heading.bullet_points:
            text += f"   • {point}\n"
        text += "\n"

    text += f"📝 Conclusion\n{notes.conclusion}\n\n"
    text += f"🔑 Keywords to Remember\n{', '.join(notes.keywords)}"

    return text


def export_filename(notes: DiamondNotes) -> str:
    """Build an ASCII-only download filename from the chapter title."""
    stem = _UNSAFE_FILENAME_CHARS.sub("_", notes.chapter_title).lower()
    return f"{stem}_notes.txt"
