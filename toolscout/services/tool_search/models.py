"""Pydantic models for the tool search service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class SearchRequest(BaseModel):
    """Request model for a tool search."""

    query: Optional[str] = None


class ToolResult(BaseModel):
    """A recommended tool as produced by the model. Not enforced."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    isFree: Optional[bool] = None
    isOfficial: Optional[bool] = None


class SearchResponse(BaseModel):
    """Response contract for a tool search. Documentation only."""

    model_config = ConfigDict(extra="allow")

    summary: str = ""
    tools: list[ToolResult] = []


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str
    details: Optional[str] = None
