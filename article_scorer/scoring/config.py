"""Configuration for the article scoring providers.

Provides Pydantic settings for backend base URLs, sampling temperature and
the optional transport timeout. All settings can be overridden via SCORING_*
environment variables. API keys are user settings and are read from the
settings store per call, never from here.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Configuration for the multi-provider scoring layer.

    Settings can be overridden via environment variables prefixed with SCORING_.

    Example:
        SCORING_CEREBRAS_API_BASE=https://api.cerebras.ai/v1
        SCORING_TEMPERATURE=0.2
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # REST backends
    openrouter_api_base: str = Field(
        default="https://openrouter.ai/api/v1",
        description="Base URL of the OpenRouter-compatible API",
    )
    cerebras_api_base: str = Field(
        default="https://api.cerebras.ai/v1",
        description="Base URL of the Cerebras-compatible API",
    )

    # Sampling
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature sent with every scoring call",
    )

    # Transport
    request_timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Timeout in seconds for backend calls; None waits for the transport",
    )
