"""Structured logging for note generation."""

import logging
from typing import Any

from backend.app.models.common import ContentCategory, Language

logger = logging.getLogger(__name__)


class StructuredGenerationLogger:
    """Structured logger for note generation outcomes."""

    def log_outcome(
        self,
        *,
        policy: str,
        outcome: str,
        category: ContentCategory,
        language: Language,
        latency_ms: float,
        failure_reason: str | None = None,
    ) -> None:
        """Log one generation with structured data."""
        log_data: dict[str, Any] = {
            "policy": policy,
            "outcome": outcome,
            "category": category.value,
            "language": language.value,
            "latency_ms": round(latency_ms, 2),
        }

        if failure_reason:
            log_data["failure_reason"] = failure_reason

        log_msg = f"Notes generation: {policy} - {outcome}"

        if outcome == "succeeded":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
