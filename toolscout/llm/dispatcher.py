"""Sequential fallback across candidate models."""

import logging
from typing import Optional

from toolscout.core.exceptions import GenerationFailure, ServiceUnavailable
from toolscout.llm.base import LLMClient

logger = logging.getLogger(__name__)


class GenerationDispatcher:
    """Tries each candidate model in order until one produces text."""

    def __init__(self, llm_client: LLMClient):
        self._llm = llm_client

    async def _attempt(self, model: str, prompt: str, **kwargs) -> str:
        try:
            text = await self._llm.generate_content(model=model, prompt=prompt, **kwargs)
        except Exception as e:
            raise GenerationFailure(model, details=str(e)) from e

        if not text or not text.strip():
            raise GenerationFailure(model, details="Model returned an empty response")
        return text

    async def dispatch(
        self, candidates: list[str], prompt: str, **kwargs
    ) -> tuple[str, str]:
        """
        Generate text with the first candidate that succeeds.

        Candidates are tried strictly one after another; the remaining ones are
        never called once a model answers.

        Args:
            candidates: Ordered model identifiers, must not be empty
            prompt: Fully rendered prompt
            **kwargs: Passed through to the LLM client

        Returns:
            Tuple of (raw text, model that produced it)

        Raises:
            ServiceUnavailable: If every candidate failed, with the last error
        """
        if not candidates:
            raise ValueError("candidates must not be empty")

        last_error: Optional[GenerationFailure] = None

        for attempt, model in enumerate(candidates, start=1):
            logger.info(f"Attempting generation with {model} ({attempt}/{len(candidates)})")
            try:
                text = await self._attempt(model, prompt, **kwargs)
            except GenerationFailure as e:
                last_error = e
                logger.warning(f"Model {model} failed: {e.details}")
                continue

            logger.info(f"Success with {model}")
            return text, model

        logger.error(f"All {len(candidates)} candidate models failed")
        raise ServiceUnavailable(
            "All candidate models are currently unavailable",
            details=last_error.details if last_error else None,
        )

    async def generate(self, candidates: list[str], prompt: str, **kwargs) -> str:
        """Like ``dispatch``, returning only the generated text."""
        text, _ = await self.dispatch(candidates, prompt, **kwargs)
        return text
