# Shared pytest configuration and fixtures
import os

os.environ.setdefault("GEMINI_API_KEY", "test-key")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from toolscout.main import app  # noqa: E402
from toolscout.services.tool_search.router import get_model_resolver, get_tool_search  # noqa: E402
from toolscout.services.tool_search.service import ToolSearchService  # noqa: E402

CLEAN_RESPONSE = '{"summary": "Password managers store credentials.", "tools": [{"title": "Bitwarden", "url": "https://bitwarden.com", "description": "Open source password manager.", "isFree": true, "isOfficial": true}]}'


@pytest.fixture
def mock_resolver():
    """Create a mock model resolver returning two candidates."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(
        return_value=["vendor-model-capable", "vendor-model-fast"]
    )
    resolver.discover = AsyncMock()
    return resolver


@pytest.fixture
def mock_llm():
    """Create a mock LLM client that answers with clean JSON."""
    llm = MagicMock()
    llm.generate_content = AsyncMock(return_value=CLEAN_RESPONSE)
    return llm


@pytest.fixture
def search_service(mock_resolver, mock_llm):
    """Tool search service wired to mocks."""
    return ToolSearchService(resolver=mock_resolver, llm_client=mock_llm)


@pytest_asyncio.fixture
async def client(search_service, mock_resolver):
    """Create a test client with the service dependencies overridden."""
    app.dependency_overrides[get_tool_search] = lambda: search_service
    app.dependency_overrides[get_model_resolver] = lambda: mock_resolver

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
