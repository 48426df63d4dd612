"""Completion client for assisted note generation with OpenAI integration.

Security: Reads API key from environment only, never hardcoded.
Returns no client when no key is present so callers use template generation.
"""

import logging
from typing import Protocol

from openai import AsyncOpenAI

from backend.app.config import get_settings

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Protocol for completion service implementations."""

    async def complete(self, *, prompt: str, system_instruction: str) -> str:
        """Send a prompt to the completion service.

        Args:
            prompt: User prompt describing the notes to produce
            system_instruction: System-level instruction fixing role and output format

        Returns:
            Raw text reply (expected to hold a JSON object)
        """
        ...


class OpenAICompletionClient:
    """OpenAI-backed completion client requesting JSON output."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 4000,
        timeout_seconds: float = 30.0,
    ):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (read from environment)
            model: Model name to use (default: gpt-4o-mini for cost efficiency)
            temperature: Sampling temperature
            max_tokens: Upper bound on reply length
            timeout_seconds: Per-request transport timeout
        """
        self.client = AsyncOpenAI(api_key=api_key, timeout=timeout_seconds)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def complete(self, *, prompt: str, system_instruction: str) -> str:
        """Request a JSON completion; SDK errors propagate to the caller."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return response.choices[0].message.content or ""


def get_completion_client() -> CompletionClient | None:
    """Factory function to get a completion client based on config.

    Returns:
        OpenAICompletionClient if API key is configured, None otherwise
    """
    settings = get_settings()
    api_key = settings.openai_api_key

    if api_key and api_key.get_secret_value():
        logger.info(f"Using OpenAI completion client (model={settings.openai_model})")
        return OpenAICompletionClient(
            api_key=api_key.get_secret_value(),
            model=settings.openai_model,
            temperature=settings.openai_temperature,
            max_tokens=settings.openai_max_tokens,
            timeout_seconds=settings.llm_timeout_seconds,
        )

    logger.warning("No OpenAI API key configured, assisted generation unavailable")
    return None
