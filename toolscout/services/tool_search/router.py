"""FastAPI router for tool search endpoints."""

import logging

from fastapi import APIRouter, Depends

from toolscout.core.config import settings
from toolscout.core.exceptions import SearchFailed, ToolScoutError
from toolscout.llm.discovery import ModelResolver, model_resolver
from toolscout.llm.models import DiscoveryResult
from toolscout.services.tool_search.models import (
    ErrorResponse,
    SearchRequest,
    SearchResponse,
)
from toolscout.services.tool_search.service import ToolSearchService, tool_search

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


def get_tool_search() -> ToolSearchService:
    """Dependency returning the tool search service."""
    return tool_search


def get_model_resolver() -> ModelResolver:
    """Dependency returning the model resolver."""
    return model_resolver


@router.post(
    "",
    responses={
        200: {"model": SearchResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def search_tools(
    request: SearchRequest,
    service: ToolSearchService = Depends(get_tool_search),
) -> dict:
    """
    Recommend software tools for a free-text query.

    The body is returned exactly as the model produced it once parsed.
    """
    try:
        return await service.search(request.query)
    except ToolScoutError:
        raise
    except Exception as e:
        logger.exception(f"Search API error: {e}")
        raise SearchFailed("Failed to generate results", details=str(e)) from e


@router.get("/models", response_model=DiscoveryResult)
async def get_models(
    resolver: ModelResolver = Depends(get_model_resolver),
) -> DiscoveryResult:
    """Show the candidate models discovered for the configured credential."""
    return await resolver.discover()


@router.get("/status")
async def get_status() -> dict:
    """Get tool search configuration."""
    return {
        "model_preference": settings.model_preference,
        "version_families": settings.version_families,
        "default_models": settings.default_models,
        "max_candidate_models": settings.max_candidate_models,
        "gemini_configured": bool(settings.gemini_api_key),
    }
