"""Tool recommendation search service."""

import logging
from typing import Any, Optional

from toolscout.core.config import settings
from toolscout.core.exceptions import QueryValidationError
from toolscout.llm import GenerationDispatcher, LLMClient, ModelResolver, get_configured_llm
from toolscout.llm.discovery import model_resolver
from toolscout.services.tool_search.normalizer import normalize

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are an expert software engineer and tech consultant.
User is looking for: "{query}"

List {min_tools} to {max_tools} of the best, industry-standard software tools or websites for this specific task.
Include a mix of premium (industry standard) and free/open-source options.

Return ONLY a valid JSON object with this exact structure:
{{
  "summary": "A 2-sentence explanation of what these tools are generally used for.",
  "tools": [
    {{
      "title": "Tool Name",
      "url": "Official Website URL",
      "description": "Short 1-sentence description of what it does.",
      "isFree": true/false,
      "isOfficial": true/false
    }}
  ]
}}
Do not include markdown formatting like ```json. Just the raw JSON string."""


class ToolSearchService:
    """Service that turns a free-text need into ranked tool recommendations."""

    def __init__(
        self,
        resolver: Optional[ModelResolver] = None,
        llm_client: Optional[LLMClient] = None,
    ):
        self._resolver = resolver or model_resolver
        self._llm_client = llm_client

    def _get_dispatcher(self) -> GenerationDispatcher:
        return GenerationDispatcher(self._llm_client or get_configured_llm())

    def validate_query(self, query: Optional[str]) -> str:
        """
        Return the stripped query.

        Raises:
            QueryValidationError: If the query is missing or blank
        """
        if query is None or not query.strip():
            raise QueryValidationError("Query is required")
        return query.strip()

    def build_prompt(self, query: str) -> str:
        """Render the recommendation prompt for a query."""
        return PROMPT_TEMPLATE.format(
            query=query,
            min_tools=settings.min_tools,
            max_tools=settings.max_tools,
        )

    async def search(self, query: Optional[str]) -> dict[str, Any]:
        """
        Recommend tools for a query.

        Args:
            query: What the user is looking for

        Returns:
            Parsed ``{summary, tools}`` object from the model

        Raises:
            QueryValidationError: If the query is blank (no network call made)
            ServiceUnavailable: If every candidate model failed
            MalformedResponse: If the model output holds no JSON object
        """
        query = self.validate_query(query)
        logger.info(f"Tool search: {query}")

        prompt = self.build_prompt(query)
        candidates = await self._resolver.resolve()

        raw_text, model = await self._get_dispatcher().dispatch(candidates, prompt)
        result = normalize(raw_text)

        tools = result.get("tools")
        logger.info(
            f"Search for '{query}' answered by {model} with "
            f"{len(tools) if isinstance(tools, list) else 0} tools"
        )
        return result


# Singleton instance
tool_search = ToolSearchService()
