"""Google Gemini LLM client for single-model content generation."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from toolscout.core.config import settings
from toolscout.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Client for Google Gemini that targets an explicit model per call."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[genai.Client] = None,
    ):
        self.api_key = api_key or settings.gemini_api_key
        self._client = client

    @property
    def client(self) -> genai.Client:
        """Lazy initialization of the Gemini SDK client."""
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_content(
        self,
        model: str,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: int = 4000,
    ) -> str:
        """
        Generate content with one specific Gemini model.

        Args:
            model: Model identifier without the ``models/`` prefix
            prompt: Fully rendered prompt
            system_instruction: Optional system instruction
            temperature: Creativity level, defaults to GENERATION_TEMPERATURE
            max_output_tokens: Maximum tokens in response

        Returns:
            Generated text content, empty string if the model returned none

        Raises:
            google.genai.errors.APIError: On any provider-side failure
        """
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=(
                settings.generation_temperature if temperature is None else temperature
            ),
            max_output_tokens=max_output_tokens,
        )

        response = await self.client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )

        text = response.text or ""
        logger.debug(f"Generated content with {len(text)} characters using {model}")
        return text


# Singleton instance for dependency injection
gemini_client = GeminiClient()
