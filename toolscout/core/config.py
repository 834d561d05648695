"""Application configuration using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "toolscout"
    debug: bool = False
    log_level: str = "INFO"

    # Gemini Configuration
    gemini_api_key: str = ""
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Model discovery
    # "capable_first": pro variant first, flash as fallback
    # "fast_first": flash variant first, pro as fallback
    model_preference: Literal["capable_first", "fast_first"] = "capable_first"
    capable_model_keyword: str = "pro"
    fast_model_keyword: str = "flash"
    # Comma-separated, newest family first
    model_version_families: str = "2.5,2.0,1.5"
    excluded_model_keywords: str = "tts,image,audio,live,embedding"
    max_candidate_models: int = 3
    default_capable_model: str = "gemini-2.5-pro"
    default_fast_model: str = "gemini-2.5-flash"
    discovery_timeout_seconds: float = 10.0
    discovery_page_size: int = 1000

    # Generation
    generation_temperature: float = 0.4
    min_tools: int = 5
    max_tools: int = 7

    @property
    def version_families(self) -> list[str]:
        """Parse comma-separated version families into list."""
        return _split_csv(self.model_version_families)

    @property
    def excluded_keywords(self) -> list[str]:
        """Parse comma-separated excluded keywords into lowercase list."""
        return [k.lower() for k in _split_csv(self.excluded_model_keywords)]

    @property
    def variant_keywords(self) -> list[str]:
        """Variant keywords in preference order."""
        if self.model_preference == "fast_first":
            return [self.fast_model_keyword, self.capable_model_keyword]
        return [self.capable_model_keyword, self.fast_model_keyword]

    @property
    def default_models(self) -> list[str]:
        """Hardcoded fallback pair, ordered by the preference policy."""
        if self.model_preference == "fast_first":
            return [self.default_fast_model, self.default_capable_model]
        return [self.default_capable_model, self.default_fast_model]


settings = Settings()
