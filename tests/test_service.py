"""Tests for the tool search service."""

import pytest
from unittest.mock import AsyncMock, patch

from toolscout.core.config import settings
from toolscout.core.exceptions import (
    MalformedResponse,
    QueryValidationError,
    ServiceUnavailable,
)
from toolscout.services.tool_search.service import ToolSearchService


class TestBuildPrompt:
    def test_prompt_contains_query_and_shape(self, search_service):
        prompt = search_service.build_prompt("video editing")

        assert 'User is looking for: "video editing"' in prompt
        assert '"summary":' in prompt
        assert '"isOfficial": true/false' in prompt

    def test_prompt_uses_configured_tool_count(self, search_service):
        with patch.object(settings, "min_tools", 3), patch.object(settings, "max_tools", 4):
            prompt = search_service.build_prompt("diagramming")

        assert "List 3 to 4 of the best" in prompt


class TestSearch:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, "", "   ", "\n\t"])
    async def test_blank_query_makes_no_calls(self, search_service, mock_resolver, mock_llm, query):
        with pytest.raises(QueryValidationError):
            await search_service.search(query)

        mock_resolver.resolve.assert_not_awaited()
        mock_llm.generate_content.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_is_stripped_into_prompt(self, search_service, mock_llm):
        await search_service.search("  password manager  ")

        prompt = mock_llm.generate_content.await_args.kwargs["prompt"]
        assert 'User is looking for: "password manager"' in prompt

    @pytest.mark.asyncio
    async def test_fallback_to_second_candidate(self, search_service, mock_llm):
        mock_llm.generate_content.side_effect = [
            RuntimeError("429 Resource has been exhausted (e.g. check quota)."),
            '```json\n{"summary": "ok", "tools": []}\n```',
        ]

        result = await search_service.search("password manager")

        assert result == {"summary": "ok", "tools": []}
        models = [c.kwargs["model"] for c in mock_llm.generate_content.await_args_list]
        assert models == ["vendor-model-capable", "vendor-model-fast"]

    @pytest.mark.asyncio
    async def test_all_candidates_fail(self, search_service, mock_llm):
        mock_llm.generate_content.side_effect = RuntimeError("model not found")

        with pytest.raises(ServiceUnavailable):
            await search_service.search("password manager")

        assert mock_llm.generate_content.await_count == 2

    @pytest.mark.asyncio
    async def test_unparseable_output(self, search_service, mock_llm):
        mock_llm.generate_content.return_value = "Sorry, I cannot help with that."

        with pytest.raises(MalformedResponse):
            await search_service.search("password manager")

    @pytest.mark.asyncio
    async def test_uses_configured_llm_when_none_injected(self, mock_resolver, mock_llm):
        service = ToolSearchService(resolver=mock_resolver)

        with patch(
            "toolscout.services.tool_search.service.get_configured_llm",
            return_value=mock_llm,
        ):
            result = await service.search("static site generator")

        assert "tools" in result
        mock_llm.generate_content.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_resolver_default_pair_used_for_dispatch(self, mock_llm):
        resolver = AsyncMock()
        resolver.resolve.return_value = settings.default_models
        service = ToolSearchService(resolver=resolver, llm_client=mock_llm)

        await service.search("note taking")

        assert mock_llm.generate_content.await_args.kwargs["model"] == settings.default_models[0]
