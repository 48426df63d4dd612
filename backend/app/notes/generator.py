"""Generation facade - template notes and assisted notes with fallback."""

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Protocol

from backend.app.config import get_settings
from backend.app.llm.client import CompletionClient, get_completion_client
from backend.app.models.common import resolve_language
from backend.app.models.notes import DiamondNotes, GenerationRequest
from backend.app.notes.assembler import assemble_headings, document_title, resolve_chapter_title
from backend.app.notes.classifier import classify_subject
from backend.app.notes.composer import compose_conclusion, compose_keywords
from backend.app.notes.parsing import FailureReason, ParseResult, parse_notes_payload
from backend.app.notes.prompts import build_notes_prompt, build_system_instruction
from backend.app.utils.logging import StructuredGenerationLogger
from backend.app.utils.metrics import PrometheusGenerationMetrics

logger = logging.getLogger(__name__)


class GenerationState(str, Enum):
    """States of an assisted generation attempt."""

    attempting = "attempting"
    parsing = "parsing"
    succeeded = "succeeded"
    fell_back = "fell_back"


@dataclass(frozen=True)
class GenerationOutcome:
    """Terminal result of an assisted generation attempt."""

    state: GenerationState
    notes: DiamondNotes
    failure: FailureReason | None = None


def build_template_notes(request: GenerationRequest) -> DiamondNotes:
    """Build notes purely from the bilingual templates.

    Deterministic and total: identical requests give identical notes.

    Raises:
        UnsupportedLanguageError: If the request language is not supported
    """
    language = resolve_language(request.language)
    category = classify_subject(request.subject)
    chapter = resolve_chapter_title(request.chapter_title, language)

    return DiamondNotes(
        chapter_title=document_title(chapter, language),
        headings=assemble_headings(
            category, chapter, request.class_level, request.subject, language
        ),
        conclusion=compose_conclusion(chapter, request.subject, request.class_level, language),
        keywords=compose_keywords(chapter, request.subject, request.class_level, category),
    )


class NotesGenerator(Protocol):
    """Protocol for notes generation policies."""

    async def generate(self, request: GenerationRequest) -> DiamondNotes:
        """Generate notes for a request."""
        ...


class DeterministicNotesGenerator:
    """Template-only generation; never fails on well-typed input."""

    policy = "deterministic"

    def __init__(
        self,
        metrics: PrometheusGenerationMetrics | None = None,
        structured_logger: StructuredGenerationLogger | None = None,
    ) -> None:
        self._metrics = metrics or PrometheusGenerationMetrics()
        self._structured_logger = structured_logger or StructuredGenerationLogger()

    async def generate(self, request: GenerationRequest) -> DiamondNotes:
        """Generate notes from templates."""
        start = time.perf_counter()
        notes = build_template_notes(request)
        latency_ms = (time.perf_counter() - start) * 1000

        self._metrics.record_generation(self.policy, GenerationState.succeeded.value, latency_ms)
        self._structured_logger.log_outcome(
            policy=self.policy,
            outcome=GenerationState.succeeded.value,
            category=classify_subject(request.subject),
            language=request.language,
            latency_ms=latency_ms,
        )
        return notes


class AssistedNotesGenerator:
    """Completion-service generation that falls back to templates on any failure."""

    policy = "assisted"

    def __init__(
        self,
        client: CompletionClient,
        timeout_seconds: float = 30.0,
        metrics: PrometheusGenerationMetrics | None = None,
        structured_logger: StructuredGenerationLogger | None = None,
    ) -> None:
        """Initialize assisted generator.

        Args:
            client: Completion service client
            timeout_seconds: Upper bound on one completion round-trip
            metrics: Metrics sink (defaults to Prometheus)
            structured_logger: Structured outcome logger
        """
        self._client = client
        self._timeout_seconds = timeout_seconds
        self._metrics = metrics or PrometheusGenerationMetrics()
        self._structured_logger = structured_logger or StructuredGenerationLogger()

    async def generate(self, request: GenerationRequest) -> DiamondNotes:
        """Generate notes; the caller cannot tell which path produced them."""
        outcome = await self.attempt(request)
        return outcome.notes

    async def attempt(self, request: GenerationRequest) -> GenerationOutcome:
        """Run one assisted attempt and report how it ended.

        Returns:
            GenerationOutcome in state succeeded or fell_back

        Raises:
            UnsupportedLanguageError: If the request language is not supported
        """
        language = resolve_language(request.language)
        category = classify_subject(request.subject)
        start = time.perf_counter()

        logger.debug(f"[assisted] state={GenerationState.attempting.value}, category={category.value}")
        try:
            raw = await asyncio.wait_for(
                self._client.complete(
                    prompt=build_notes_prompt(request, category),
                    system_instruction=build_system_instruction(),
                ),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(f"Completion service timed out after {self._timeout_seconds}s")
            result = ParseResult(failure=FailureReason.timeout)
        except Exception as e:
            logger.error(f"Completion service call failed: {e}")
            result = ParseResult(failure=FailureReason.transport_error)
        else:
            logger.debug(f"[assisted] state={GenerationState.parsing.value}, chars={len(raw or '')}")
            try:
                result = parse_notes_payload(raw)
            except Exception as e:
                logger.error(f"Completion reply could not be parsed: {e}")
                result = ParseResult(failure=FailureReason.invalid_json)

        if result.notes is not None:
            outcome = GenerationOutcome(state=GenerationState.succeeded, notes=result.notes)
        else:
            reason = result.failure or FailureReason.invalid_json
            logger.warning(f"Falling back to template generation (reason={reason.value})")
            self._metrics.inc_fallback(reason.value)
            outcome = GenerationOutcome(
                state=GenerationState.fell_back,
                notes=build_template_notes(request),
                failure=reason,
            )

        latency_ms = (time.perf_counter() - start) * 1000
        self._metrics.record_generation(self.policy, outcome.state.value, latency_ms)
        self._structured_logger.log_outcome(
            policy=self.policy,
            outcome=outcome.state.value,
            category=category,
            language=language,
            latency_ms=latency_ms,
            failure_reason=outcome.failure.value if outcome.failure else None,
        )
        return outcome


@lru_cache
def get_notes_generator() -> NotesGenerator:
    """Factory function to get the configured generation policy.

    Returns:
        AssistedNotesGenerator when assisted generation is enabled and a
        completion client is available, DeterministicNotesGenerator otherwise
    """
    settings = get_settings()

    if settings.generation_policy == "assisted":
        client = get_completion_client()
        if client is not None:
            return AssistedNotesGenerator(client, timeout_seconds=settings.llm_timeout_seconds)

    logger.info("Using template notes generation")
    return DeterministicNotesGenerator()
