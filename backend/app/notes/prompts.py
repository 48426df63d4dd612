"""Prompt construction for assisted note generation."""

from backend.app.models.common import ContentCategory, Language
from backend.app.models.notes import GenerationRequest
from backend.app.notes.assembler import resolve_chapter_title

CATEGORY_GUIDANCE: dict[ContentCategory, str] = {
    ContentCategory.mathematics: (
        "Focus on key formulas, theorems and their derivations, step-by-step solved "
        "examples, common mistakes, and exam-oriented practice tips."
    ),
    ContentCategory.science: (
        "Focus on scientific principles and laws, important experiments with their "
        "method and observations, safety precautions, and everyday examples."
    ),
    ContentCategory.social_studies: (
        "Focus on chronology of events, key personalities, causes and consequences, "
        "and the relevance of the topic in today's context."
    ),
    ContentCategory.other: (
        "Focus on the main concepts of the chapter, clear explanations with examples, "
        "and practical applications in daily life."
    ),
}

LANGUAGE_INSTRUCTION: dict[Language, str] = {
    Language.english: "Write every heading, bullet point and the conclusion in English.",
    Language.hindi: (
        "Write every heading, bullet point and the conclusion in Hindi (Devanagari script). "
        "Prefix chapter_title with 'अध्याय: '."
    ),
}


def build_system_instruction() -> str:
    """Build the system instruction fixing the reply format."""
    return """You are an expert NCERT teacher who writes concise, exam-focused study notes
called Diamond Notes for Indian school students.

Reply with a single JSON object and nothing else, using exactly this shape:
{
  "chapter_title": "string",
  "headings": [
    {"number": 1, "title": "string", "bullet_points": ["string", "..."]}
  ],
  "conclusion": "string",
  "keywords": ["string", "..."]
}

CRITICAL CONSTRAINTS:
- Number headings consecutively starting at 1.
- Give each heading between 2 and 6 bullet points.
- Keep the content accurate and appropriate for the stated class level.
- Do NOT include markdown, commentary or any text outside the JSON object."""


def build_notes_prompt(request: GenerationRequest, category: ContentCategory) -> str:
    """Build the user prompt for a notes request.

    The uploaded document itself is never embedded; the prompt only says one was provided.
    """
    chapter = resolve_chapter_title(request.chapter_title, request.language)

    lines = []
    lines.append(f"Create Diamond Notes for Class {request.class_level} {request.subject}.")
    lines.append(f"- Chapter: {chapter}")
    lines.append(f"- Subject guidance: {CATEGORY_GUIDANCE[category]}")
    if request.has_source_document:
        lines.append(
            "- The student uploaded this chapter as a PDF; base the notes on what the "
            "NCERT chapter actually covers."
        )
    lines.append(f"- Language: {LANGUAGE_INSTRUCTION[request.language]}")
    lines.append("")
    lines.append(
        "Include an introduction, the core concepts, worked examples or applications, "
        "and a final section of important points to remember."
    )

    return "\n".join(lines)
