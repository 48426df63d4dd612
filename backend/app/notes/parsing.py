"""Parsing of completion-service replies into DiamondNotes."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from backend.app.models.notes import DiamondNotes, NotesHeading


class FailureReason(str, Enum):
    """Why the assisted path could not produce a document."""

    timeout = "timeout"
    transport_error = "transport_error"
    empty_response = "empty_response"
    invalid_json = "invalid_json"
    not_an_object = "not_an_object"
    missing_headings = "missing_headings"
    invalid_headings = "invalid_headings"


@dataclass(frozen=True)
class ParseResult:
    """Either parsed notes or the reason parsing failed."""

    notes: DiamondNotes | None = None
    failure: FailureReason | None = None

    @property
    def ok(self) -> bool:
        return self.notes is not None


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    s = text.strip()
    if not s.startswith("```"):
        return s

    s = s[3:]
    if s.lower().startswith("json"):
        s = s[4:]
    end = s.rfind("```")
    if end != -1:
        s = s[:end]
    return s.strip()


def _load_json(text: str) -> Any:
    """Decode JSON, retrying on the outermost braces when prose surrounds it."""
    s = _strip_code_fence(text)
    try:
        return json.loads(s)
    except json.JSONDecodeError:
        start = s.find("{")
        end = s.rfind("}")
        if start == -1 or end <= start:
            raise
        return json.loads(s[start : end + 1])


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_as_text(item) for item in value if item is not None]


def _as_number(value: Any, default: int) -> int:
    # bool is an int subclass; treat it as missing
    if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
        return value
    return default


def parse_notes_payload(raw: str | None) -> ParseResult:
    """Parse a completion reply into DiamondNotes.

    ``headings`` is the only required field: absent, empty, or containing a
    non-object entry is a failure. Other missing fields fall back to empty
    text or empty lists.

    Args:
        raw: Raw reply text from the completion service

    Returns:
        ParseResult carrying notes on success, or a failure reason
    """
    if raw is None or not raw.strip():
        return ParseResult(failure=FailureReason.empty_response)

    try:
        payload = _load_json(raw)
    except (ValueError, RecursionError):
        # JSONDecodeError, oversized integers and excessive nesting
        return ParseResult(failure=FailureReason.invalid_json)

    if not isinstance(payload, dict):
        return ParseResult(failure=FailureReason.not_an_object)

    raw_headings = payload.get("headings")
    if not isinstance(raw_headings, list) or not raw_headings:
        return ParseResult(failure=FailureReason.missing_headings)

    headings: list[NotesHeading] = []
    for position, item in enumerate(raw_headings, start=1):
        if not isinstance(item, dict):
            return ParseResult(failure=FailureReason.invalid_headings)
        headings.append(
            NotesHeading(
                number=_as_number(item.get("number"), position),
                title=_as_text(item.get("title")),
                bullet_points=_as_text_list(item.get("bullet_points")),
            )
        )

    notes = DiamondNotes(
        chapter_title=_as_text(payload.get("chapter_title")),
        headings=headings,
        conclusion=_as_text(payload.get("conclusion")),
        keywords=_as_text_list(payload.get("keywords")),
    )
    return ParseResult(notes=notes)
