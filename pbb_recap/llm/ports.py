"""Port interface for the LLM module. Callers depend on this, not on the LiteLLM implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from pbb_recap.llm.types import LLMRequest, LLMResponse


@runtime_checkable
class LLMClientPort(Protocol):
    """One completion against the configured model, retries included."""

    async def acompletion(
        self,
        req: LLMRequest,
        *,
        api_key: str | None = None,
    ) -> LLMResponse:
        """Execute one completion. api_key overrides the configured key. Raises LLMError on failure."""
        ...
