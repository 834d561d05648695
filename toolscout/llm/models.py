"""Pydantic models for model discovery."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class ModelDescriptor(BaseModel):
    """A model entry from the provider listing."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    supports_generation: bool


class DiscoveryResult(BaseModel):
    """Outcome of model discovery. ``candidates`` is never empty."""

    candidates: list[str]
    source: Literal["discovered", "default"]
    error: Optional[str] = None
