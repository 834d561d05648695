"""Unified LLM interface used by the generation dispatcher."""

import logging
from typing import Optional, Protocol

from toolscout.core.config import settings
from toolscout.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    """Protocol for LLM clients that generate with an explicit model."""

    async def generate_content(
        self,
        model: str,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: int = 4000,
    ) -> str:
        """Generate content from the given model."""
        ...


def get_llm_client() -> LLMClient:
    """
    Get the Gemini client after checking the credential is configured.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is missing
    """
    from toolscout.llm.gemini import gemini_client

    if not settings.gemini_api_key:
        raise ConfigurationError("Missing GEMINI_API_KEY in environment variables")
    logger.info("Using Gemini LLM provider")
    return gemini_client


# Lazy-loaded singleton
_llm_client: Optional[LLMClient] = None


def get_configured_llm() -> LLMClient:
    """Get the singleton LLM client instance."""
    global _llm_client
    if _llm_client is None:
        _llm_client = get_llm_client()
    return _llm_client
