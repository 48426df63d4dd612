"""Tests for the subject catalog."""

import pytest

from backend.app.subjects import subjects_for_class


@pytest.mark.parametrize("class_level", [1, 5, 8])
def test_primary_classes(class_level: int) -> None:
    """Test subjects for classes 1-8."""
    assert subjects_for_class(class_level) == [
        "Mathematics",
        "English",
        "Hindi",
        "Bengali",
        "Science",
        "Social Science",
    ]


@pytest.mark.parametrize("class_level", [9, 10])
def test_secondary_classes_split_science_and_social_studies(class_level: int) -> None:
    """Test subjects for classes 9-10."""
    subjects = subjects_for_class(class_level)

    assert "Physics" in subjects
    assert "Political Science" in subjects
    assert "Science" not in subjects
    assert len(subjects) == 11


def test_senior_classes_merge_streams_without_duplicates() -> None:
    """Test that classes 11-12 list every stream's subjects once."""
    subjects = subjects_for_class(11)

    assert subjects == subjects_for_class(12)
    assert len(subjects) == len(set(subjects))
    assert subjects[:4] == ["Mathematics", "Physics", "Chemistry", "Biology"]
    assert "Accountancy" in subjects
    assert "Psychology" in subjects
    assert subjects.count("Economics") == 1


@pytest.mark.parametrize("class_level", [0, 13, -1])
def test_out_of_range_is_empty(class_level: int) -> None:
    """Test levels outside 1-12."""
    assert subjects_for_class(class_level) == []
