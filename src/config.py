"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Meeting Action Items"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Deepgram (transcription + summarization)
    deepgram_api_key: str | None = Field(default=None)
    deepgram_base_url: str = Field(default="https://api.deepgram.com/v1")
    default_audio_content_type: str = Field(default="audio/mp3")

    # Anthropic (LLM for action item extraction)
    anthropic_api_key: str | None = Field(default=None)
    anthropic_model: str = Field(default="claude-sonnet-4-5")
    extraction_max_tokens: int = Field(default=4096, gt=0)

    # External call bounds
    request_timeout_seconds: float = Field(
        default=120.0,
        gt=0.0,
        le=900.0,
        description="Upper bound for any single call to an external service",
    )

    # Upload limits
    max_upload_mb: int = Field(default=100, gt=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
