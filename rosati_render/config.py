"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (BEARER_TOKEN, OPENAI_API_KEY, ANTHROPIC_API_KEY)
    - get_settings() is cached (lru_cache): single instance per process, no reload
    - production refuses the development bearer token

Design Decisions:
    - No env prefix: variable names match the deployed service's existing environment
    - create_app() also accepts an explicit Settings, so tests never depend on this cache
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rosati_render.core.domain_types import DEFAULT_MAX_UPLOAD_BYTES

DEV_BEARER_TOKEN = "dev-token"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    bearer_token: str = Field(DEV_BEARER_TOKEN, min_length=1)

    # OpenAI
    openai_api_key: str = "sk-placeholder"
    tidy_model: str = "gpt-4.1-mini"
    render_model: str = "gpt-image-1"

    # Anthropic (alternate tidy vendor)
    anthropic_api_key: str = "sk-ant-placeholder"
    anthropic_tidy_model: str = "claude-haiku-4-5"
    anthropic_max_tokens: int = Field(1024, ge=1)

    tidy_provider: Literal["openai", "anthropic"] = "openai"

    # Uploads
    max_upload_bytes: int = Field(DEFAULT_MAX_UPLOAD_BYTES, ge=1)

    # API
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"  # nosec B104
    port: int = 8787
    environment: Literal["development", "production"] = "development"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def require_real_token_in_production(self) -> "Settings":
        if self.environment == "production" and self.bearer_token == DEV_BEARER_TOKEN:
            raise ValueError(
                "BEARER_TOKEN must be set to a non-default value in production",
            )
        return self

    @property
    def uses_dev_token(self) -> bool:
        return self.bearer_token == DEV_BEARER_TOKEN


@lru_cache
def get_settings() -> Settings:
    return Settings()
