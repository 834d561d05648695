"""ToolScout - AI-powered software tool finder.

FastAPI application entry point with lifespan management.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from toolscout.core.config import settings
from toolscout.core.exceptions import ConfigurationError, ToolScoutError
from toolscout.core.logging import setup_logging
from toolscout.services.tool_search import router as search_router

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


def check_configuration() -> None:
    """
    Fail fast when the provider credential is missing.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set
    """
    if not settings.gemini_api_key:
        raise ConfigurationError("Missing GEMINI_API_KEY in environment variables")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown."""
    # Startup
    check_configuration()
    logger.info(
        f"Starting {settings.app_name} (model preference: {settings.model_preference})..."
    )
    yield
    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="ToolScout",
    description="Find the best software tools for a task, ranked by Gemini",
    version="0.1.0",
    lifespan=lifespan,
)

# Include service routers
app.include_router(search_router)


@app.exception_handler(ToolScoutError)
async def handle_toolscout_error(request: Request, exc: ToolScoutError) -> JSONResponse:
    """Render ToolScout errors as ``{error, details}`` bodies."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Health check models
class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    api_key_configured: bool


@app.get("/")
async def root() -> dict:
    """Root endpoint with service info."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "description": "AI-powered software tool finder",
        "services": ["tool_search"],
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health."""
    configured = bool(settings.gemini_api_key)
    return HealthResponse(
        status="healthy" if configured else "degraded",
        api_key_configured=configured,
    )
