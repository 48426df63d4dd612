"""Common types and enums shared across all models."""

from enum import Enum


class Language(str, Enum):
    """Output language of the generated notes."""

    english = "english"
    hindi = "hindi"


class UnsupportedLanguageError(ValueError):
    """Raised when a language outside the supported pair is requested."""


def resolve_language(value: Language | str) -> Language:
    """Coerce a language value, failing fast on anything unsupported.

    Raises:
        UnsupportedLanguageError: If value is not one of the Language members
    """
    if isinstance(value, Language):
        return value
    try:
        return Language(value)
    except ValueError as e:
        raise UnsupportedLanguageError(f"Unsupported language: {value!r}") from e


class ContentCategory(str, Enum):
    """Content category derived from the free-text subject."""

    mathematics = "mathematics"
    science = "science"
    social_studies = "social_studies"
    other = "other"
