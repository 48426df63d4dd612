"""Tests for assisted-generation prompt construction."""

from backend.app.models.common import ContentCategory, Language
from backend.app.models.notes import GenerationRequest
from backend.app.notes.prompts import (
    CATEGORY_GUIDANCE,
    build_notes_prompt,
    build_system_instruction,
)


def test_system_instruction_pins_json_shape() -> None:
    """Test that the system instruction describes the reply format."""
    instruction = build_system_instruction()

    assert "CRITICAL CONSTRAINTS:" in instruction
    for field in ("chapter_title", "headings", "bullet_points", "conclusion", "keywords"):
        assert f'"{field}"' in instruction


def test_prompt_embeds_request_and_category_guidance(math_request: GenerationRequest) -> None:
    """Test that the prompt carries class, subject, chapter and guidance."""
    prompt = build_notes_prompt(math_request, ContentCategory.mathematics)

    assert "Class 10 Mathematics" in prompt
    assert "- Chapter: Linear Equations" in prompt
    assert CATEGORY_GUIDANCE[ContentCategory.mathematics] in prompt
    assert "in English" in prompt
    assert "PDF" not in prompt


def test_prompt_mentions_upload_without_embedding_bytes() -> None:
    """Test that an uploaded document is noted but never sent."""
    request = GenerationRequest(
        class_level=6,
        subject="History",
        source_document=b"%PDF-1.4 SECRET-BYTES",
        language=Language.hindi,
    )

    prompt = build_notes_prompt(request, ContentCategory.social_studies)

    assert "uploaded this chapter as a PDF" in prompt
    assert "SECRET-BYTES" not in prompt
    assert "- Chapter: पीडीएफ से अध्याय" in prompt
    assert "Hindi" in prompt
    assert CATEGORY_GUIDANCE[ContentCategory.social_studies] in prompt
