"""LLM integrations for ToolScout."""

from toolscout.llm.base import get_configured_llm, get_llm_client, LLMClient
from toolscout.llm.discovery import ModelResolver, model_resolver
from toolscout.llm.dispatcher import GenerationDispatcher
from toolscout.llm.gemini import GeminiClient, gemini_client

__all__ = [
    "get_configured_llm",
    "get_llm_client",
    "LLMClient",
    "ModelResolver",
    "model_resolver",
    "GenerationDispatcher",
    "GeminiClient",
    "gemini_client",
]
