"""LLM module configuration. Env prefix: LLM_. Gemini key: LLM_GEMINI_API_KEY."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Settings for the Gemini client and its retry policy. All overridable via LLM_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gemini_api_key: str | None = Field(default=None, description="API key (env: LLM_GEMINI_API_KEY)")
    gemini_model: str = Field(default="gemini/gemini-3-pro-preview", description="Gemini model (gemini/ prefix)")
    gemini_safety_settings: list[dict] | None = Field(default=None, description="Optional safety settings")
    default_timeout_s: float = Field(default=120.0, gt=0, description="Transport timeout per request")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0, description="Sampling temperature (provider default if unset)")

    max_attempts: int = Field(default=3, ge=1, description="Attempts per request, first call included")
    retry_initial_delay_s: float = Field(default=2.0, ge=0, description="Delay before the first retry")
    retry_backoff_multiplier: float = Field(default=2.0, ge=1, description="Delay multiplier per retry")
