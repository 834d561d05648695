"""Tool search service module."""

from toolscout.services.tool_search.router import router
from toolscout.services.tool_search.service import tool_search

__all__ = ["router", "tool_search"]
