"""Subject classifier - maps a free-text subject onto a content category."""

from backend.app.models.common import ContentCategory

# Checked in order; the first category with a matching keyword wins.
SUBJECT_KEYWORDS: tuple[tuple[ContentCategory, tuple[str, ...]], ...] = (
    (
        ContentCategory.mathematics,
        ("mathematics", "math", "गणित"),
    ),
    (
        ContentCategory.science,
        (
            "science",
            "physics",
            "chemistry",
            "biology",
            "विज्ञान",
            "भौतिकी",
            "रसायन",
            "जीवविज्ञान",
        ),
    ),
    (
        ContentCategory.social_studies,
        (
            "history",
            "geography",
            "political",
            "economics",
            "इतिहास",
            "भूगोल",
            "राजनीति",
            "अर्थशास्त्र",
        ),
    ),
)


def classify_subject(subject: str) -> ContentCategory:
    """Classify a subject by case-insensitive substring match.

    Args:
        subject: Free-text subject name (English or Hindi)

    Returns:
        Matching category, or ContentCategory.other when nothing matches
    """
    subject_lower = subject.lower()
    for category, keywords in SUBJECT_KEYWORDS:
        if any(keyword in subject_lower for keyword in keywords):
            return category
    return ContentCategory.other
