"""Gemini (Google AI Studio) provider: build LiteLLM kwargs. API key passed explicitly."""
from __future__ import annotations

from typing import Any

from pbb_recap.llm.settings import LLMSettings


def gemini_kwargs(settings: LLMSettings, *, api_key: str | None = None) -> dict[str, Any]:
    """Build provider kwargs for Gemini. A caller-supplied key wins over the configured one."""
    out: dict[str, Any] = {
        "model": settings.gemini_model,
    }
    key = api_key or settings.gemini_api_key
    if key:
        out["api_key"] = key
    if settings.gemini_safety_settings is not None:
        out["safety_settings"] = settings.gemini_safety_settings
    return out


def inline_document_part(data_base64: str, mime_type: str) -> dict[str, Any]:
    """OpenAI-style content part carrying a base64 document; LiteLLM turns it into Gemini inline_data."""
    data_url = f"data:{mime_type};base64,{data_base64}"
    if mime_type.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": data_url}}
    return {"type": "file", "file": {"file_data": data_url}}
