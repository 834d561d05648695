"""Exception hierarchy for ToolScout.

Each error carries a human-readable ``message`` plus optional raw
``details`` and the HTTP status the API reports it with.
"""

from typing import Optional


class ToolScoutError(Exception):
    """Base exception for all ToolScout errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Serialize to the ``{error, details}`` response body."""
        body: dict = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(ToolScoutError):
    """Required configuration is missing. Fatal at startup."""


class QueryValidationError(ToolScoutError):
    """The incoming search query is missing or blank."""

    status_code = 400


class DiscoveryFailure(ToolScoutError):
    """Model listing failed or returned unusable data. Never surfaced."""


class GenerationFailure(ToolScoutError):
    """A single candidate model failed to generate content."""

    def __init__(self, model: str, details: Optional[str] = None):
        super().__init__(f"Generation failed with model '{model}'", details)
        self.model = model


class ServiceUnavailable(ToolScoutError):
    """Every candidate model failed."""

    status_code = 503


class MalformedResponse(ToolScoutError):
    """No valid JSON object could be extracted from the model output."""


class SearchFailed(ToolScoutError):
    """Unexpected failure while serving a search request."""
