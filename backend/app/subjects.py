"""Subject catalog per class level."""

PRIMARY_SUBJECTS: tuple[str, ...] = (
    "Mathematics",
    "English",
    "Hindi",
    "Bengali",
    "Science",
    "Social Science",
)

SECONDARY_SUBJECTS: tuple[str, ...] = (
    "Mathematics",
    "English",
    "Hindi",
    "Bengali",
    "Physics",
    "Chemistry",
    "Biology",
    "History",
    "Geography",
    "Political Science",
    "Economics",
)

SENIOR_STREAMS: dict[str, tuple[str, ...]] = {
    "Science": ("Mathematics", "Physics", "Chemistry", "Biology"),
    "Commerce": ("Economics", "Business Studies", "Accountancy", "Mathematics"),
    "Arts": (
        "History",
        "Geography",
        "Political Science",
        "Economics",
        "Sociology",
        "Philosophy",
        "Psychology",
        "Social Science",
    ),
}


def subjects_for_class(class_level: int) -> list[str]:
    """List the subjects offered for a class level.

    Classes 11-12 get every stream's subjects, deduplicated in first-seen order.
    Levels outside 1-12 get an empty list.
    """
    if 1 <= class_level <= 8:
        return list(PRIMARY_SUBJECTS)
    if 9 <= class_level <= 10:
        return list(SECONDARY_SUBJECTS)
    if 11 <= class_level <= 12:
        subjects: list[str] = []
        for stream_subjects in SENIOR_STREAMS.values():
            for subject in stream_subjects:
                if subject not in subjects:
                    subjects.append(subject)
        return subjects
    return []
