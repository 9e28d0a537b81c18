"""Gemini smoke test. Skipped if no API key."""
import os

import pytest

from pbb_recap.llm.client_litellm import LiteLLMClient
from pbb_recap.llm.settings import LLMSettings
from pbb_recap.llm.types import LLMMessage, LLMRequest


@pytest.mark.integration
@pytest.mark.skipif(
    not os.environ.get("LLM_GEMINI_API_KEY"),
    reason="LLM_GEMINI_API_KEY not set",
)
@pytest.mark.asyncio
async def test_gemini_smoke() -> None:
    client = LiteLLMClient(LLMSettings())
    req = LLMRequest(messages=[LLMMessage(role="user", content="Reply with one word: OK")])
    resp = await client.acompletion(req)
    assert resp.text
    assert resp.latency_ms >= 0
    assert resp.provider.value == "gemini"
