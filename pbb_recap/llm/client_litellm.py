"""
LiteLLM client wrapper: normalize request/response, timeout, retries.
Exception mapping (LiteLLM -> LLMError), message always prefixed with the HTTP status when known:
  - litellm.exceptions.APITimeoutError / Timeout -> LLMTimeout
  - litellm.exceptions.RateLimitError -> LLMRateLimited (429)
  - litellm.exceptions.AuthenticationError / PermissionDeniedError -> LLMAuthError
  - litellm.exceptions.BadRequestError / InvalidRequestError -> LLMBadRequest
  - litellm.exceptions.InternalServerError -> LLMUnavailable (500)
  - litellm.exceptions.ServiceUnavailableError -> LLMUnavailable (503)
  - APIError / APIConnectionError / anything with a 5xx status_code -> LLMUnavailable
  - unknown -> LLMError(UNKNOWN)
"""
from __future__ import annotations

import asyncio
import time
from typing import Any

from litellm import acompletion

from pbb_recap.llm.errors import (
    LLMAuthError,
    LLMBadRequest,
    LLMError,
    LLMRateLimited,
    LLMTimeout,
    LLMUnavailable,
)
from pbb_recap.llm.providers import gemini_kwargs
from pbb_recap.llm.retry import RetryPolicy, SleepFn, with_retry
from pbb_recap.llm.settings import LLMSettings
from pbb_recap.llm.telemetry import log_llm_call
from pbb_recap.llm.types import LLMProvider, LLMRequest, LLMResponse, LLMUsage


def _status_prefixed(status: int | None, e: Exception) -> str:
    text = str(e) or type(e).__name__
    if status is None or str(status) in text:
        return text
    return f"{status} {text}"


def _map_exception(e: Exception, provider: LLMProvider) -> LLMError:
    """Map LiteLLM/provider exceptions to LLMError. Uses class name so it works across import paths."""
    if isinstance(e, LLMError):
        return e
    exc_name = type(e).__name__
    status = getattr(e, "status_code", None)
    if not isinstance(status, int):
        status = None
    if exc_name in ("APITimeoutError", "Timeout"):
        return LLMTimeout(_status_prefixed(status, e), details=exc_name, provider=provider, status_code=status)
    if exc_name == "RateLimitError":
        return LLMRateLimited(_status_prefixed(429, e), details=exc_name, provider=provider)
    if exc_name in ("AuthenticationError", "PermissionDeniedError"):
        return LLMAuthError(_status_prefixed(status, e), details=exc_name, provider=provider, status_code=status)
    if exc_name in ("BadRequestError", "InvalidRequestError"):
        return LLMBadRequest(_status_prefixed(status or 400, e), details=exc_name, provider=provider, status_code=status or 400)
    if exc_name == "InternalServerError":
        return LLMUnavailable(_status_prefixed(500, e), details=exc_name, provider=provider, status_code=500)
    if exc_name == "ServiceUnavailableError":
        return LLMUnavailable(_status_prefixed(503, e), details=exc_name, provider=provider, status_code=503)
    if exc_name in ("APIConnectionError", "APIError") or status in (500, 502, 503, 504):
        return LLMUnavailable(_status_prefixed(status, e), details=exc_name, provider=provider, status_code=status)
    return LLMError(
        _status_prefixed(status, e),
        code="UNKNOWN",
        status_code=status,
        provider=provider,
        details=exc_name,
    )


def _request_to_kwargs(req: LLMRequest, timeout_s: float) -> dict[str, Any]:
    """Build LiteLLM completion kwargs (model and key excluded) from LLMRequest."""
    kwargs: dict[str, Any] = {
        "messages": [m.model_dump() for m in req.messages],
        "timeout": timeout_s,
    }
    if req.temperature is not None:
        kwargs["temperature"] = req.temperature
    if req.max_output_tokens is not None:
        kwargs["max_tokens"] = req.max_output_tokens
    if req.response_format is not None:
        kwargs["response_format"] = req.response_format
    return kwargs


def _response_from_completion(
    raw: Any,
    provider: LLMProvider,
    model: str,
    latency_ms: int,
    attempts: int,
) -> LLMResponse:
    """Build LLMResponse from LiteLLM response object."""
    text = ""
    usage = None
    finish_reason = None
    if getattr(raw, "choices", None):
        c0 = raw.choices[0]
        msg = getattr(c0, "message", None)
        if msg is not None:
            text = getattr(msg, "content", None) or ""
        finish_reason = getattr(c0, "finish_reason", None)
    if getattr(raw, "usage", None):
        u = raw.usage
        usage = LLMUsage(
            input_tokens=getattr(u, "prompt_tokens", 0) or 0,
            output_tokens=getattr(u, "completion_tokens", 0) or 0,
            total_tokens=getattr(u, "total_tokens", 0) or 0,
        )
    return LLMResponse(
        text=text,
        usage=usage,
        provider=provider,
        model=model,
        latency_ms=latency_ms,
        attempts=attempts,
        finish_reason=finish_reason,
    )


class LiteLLMClient:
    """Async LiteLLM wrapper for Gemini: timeout, retry policy, request/response normalization."""

    def __init__(
        self,
        settings: LLMSettings | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._settings = settings or LLMSettings()
        self._policy = retry_policy or RetryPolicy.from_settings(self._settings)
        self._sleep = sleep
        self._provider = LLMProvider.GEMINI

    async def acompletion(
        self,
        req: LLMRequest,
        *,
        api_key: str | None = None,
    ) -> LLMResponse:
        """Execute one completion with retries. Raises LLMError on failure."""
        provider_kwargs = gemini_kwargs(self._settings, api_key=api_key)
        if "api_key" not in provider_kwargs:
            raise LLMAuthError(
                "Gemini API key not configured (set LLM_GEMINI_API_KEY or pass an override)",
                provider=self._provider,
            )
        model = provider_kwargs["model"]
        timeout = req.timeout_s or self._settings.default_timeout_s
        kwargs = {**_request_to_kwargs(req, timeout), **provider_kwargs}
        if req.temperature is None and self._settings.temperature is not None:
            kwargs["temperature"] = self._settings.temperature

        attempts = 0

        async def call() -> Any:
            nonlocal attempts
            attempts += 1
            try:
                return await acompletion(**kwargs)
            except Exception as e:  # noqa: BLE001
                raise _map_exception(e, self._provider) from e

        document = req.metadata.get("document")
        t0 = time.perf_counter()
        try:
            raw = await with_retry(call, self._policy, sleep=self._sleep, label=f"{model} completion")
        except LLMError as e:
            log_llm_call(
                provider=self._provider.value,
                model=model,
                latency_ms=int((time.perf_counter() - t0) * 1000),
                status="FAILED",
                attempts=attempts,
                document=document,
                error_code=e.code,
            )
            raise
        latency_ms = int((time.perf_counter() - t0) * 1000)
        log_llm_call(
            provider=self._provider.value,
            model=model,
            latency_ms=latency_ms,
            status="SUCCEEDED",
            attempts=attempts,
            document=document,
        )
        return _response_from_completion(raw, self._provider, model, latency_ms, attempts)
