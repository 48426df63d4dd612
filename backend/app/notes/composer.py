"""Conclusion and keyword composition."""

from backend.app.models.common import ContentCategory, Language, resolve_language
from backend.app.notes.templates import BASE_KEYWORDS, CATEGORY_KEYWORDS, CONCLUSION


def compose_conclusion(
    chapter_title: str, subject: str, class_level: int, language: Language
) -> str:
    """Render the closing paragraph in the requested language."""
    template = CONCLUSION[resolve_language(language)]
    return template.format(chapter=chapter_title, subject=subject, class_level=class_level)


def compose_keywords(
    chapter_title: str, subject: str, class_level: int, category: ContentCategory
) -> list[str]:
    """Build the keyword list: base terms followed by the category's terms.

    Order is preserved and duplicates are kept.
    """
    values = {"chapter": chapter_title, "subject": subject, "class_level": class_level}
    keywords = [keyword.format(**values) for keyword in BASE_KEYWORDS]
    keywords.extend(CATEGORY_KEYWORDS[category])
    return keywords
