"""Section assembler - builds the fixed four-heading body of the notes."""

from backend.app.models.common import ContentCategory, Language, resolve_language
from backend.app.models.notes import NotesHeading
from backend.app.notes.templates import (
    DOCUMENT_TITLE,
    PLACEHOLDER_CHAPTER_TITLE,
    SECTION_ORDER,
    section_template,
)


def resolve_chapter_title(chapter_title: str | None, language: Language) -> str:
    """Return the chapter title, or the language's placeholder when absent."""
    if chapter_title:
        return chapter_title
    return PLACEHOLDER_CHAPTER_TITLE[resolve_language(language)]


def document_title(chapter_title: str, language: Language) -> str:
    """Render the document title using the language's chapter-title convention."""
    return DOCUMENT_TITLE[resolve_language(language)].format(chapter=chapter_title)


def assemble_headings(
    category: ContentCategory,
    chapter_title: str | None,
    class_level: int,
    subject: str,
    language: Language,
) -> list[NotesHeading]:
    """Assemble the ordered headings for a chapter.

    Always yields exactly four headings numbered 1-4: introduction, two
    category-specific sections, and important points.

    Args:
        category: Content category of the subject
        chapter_title: Chapter name, or None to use the placeholder
        class_level: School class (1-12)
        subject: Subject label as supplied by the caller
        language: Output language

    Returns:
        Headings in document order

    Raises:
        UnsupportedLanguageError: If language is not supported
    """
    language = resolve_language(language)
    chapter = resolve_chapter_title(chapter_title, language)
    values = {"chapter": chapter, "class_level": class_level, "subject": subject}

    headings: list[NotesHeading] = []
    for number, role in enumerate(SECTION_ORDER, start=1):
        template = section_template(category, role, language)
        headings.append(
            NotesHeading(
                number=number,
                title=template.title.format(**values),
                bullet_points=[bullet.format(**values) for bullet in template.bullet_points],
            )
        )
    return headings
