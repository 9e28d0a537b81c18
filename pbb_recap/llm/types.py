"""Typed request/response models for the LLM module (Pydantic v2)."""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class LLMProvider(str, Enum):
    """Supported LLM providers."""

    GEMINI = "gemini"


class LLMMessage(BaseModel):
    """Single message in OpenAI-style format. content is text or a list of content parts."""

    role: Literal["system", "user", "assistant"]
    content: str | list[dict[str, Any]]


class LLMRequest(BaseModel):
    """Request for a single completion."""

    messages: list[LLMMessage]
    temperature: float | None = None
    max_output_tokens: int | None = None
    response_format: dict[str, Any] | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    timeout_s: float | None = None


class LLMUsage(BaseModel):
    """Token usage and optional cost."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    cost_usd: float | None = None


class LLMResponse(BaseModel):
    """Normalized response from the provider."""

    text: str
    usage: LLMUsage | None = None
    provider: LLMProvider
    model: str
    latency_ms: int
    attempts: int = 1
    finish_reason: str | None = None
