"""Error taxonomy for the LLM module. Messages carry the HTTP status so retry checks can match on them."""
from __future__ import annotations

from pbb_recap.llm.types import LLMProvider


class LLMError(Exception):
    """Base for all LLM errors. code is stable for callers; details must not leak secrets."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "UNKNOWN",
        status_code: int | None = None,
        provider: LLMProvider | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.provider = provider
        self.details = details or ""


class LLMTimeout(LLMError):
    """Request timed out."""

    def __init__(self, message: str = "LLM request timed out", **kwargs: object) -> None:
        super().__init__(message, code="TIMEOUT", **kwargs)


class LLMRateLimited(LLMError):
    """Rate limit (429) or quota exceeded."""

    def __init__(self, message: str = "429 LLM rate limited", **kwargs: object) -> None:
        kwargs.setdefault("status_code", 429)
        super().__init__(message, code="RATE_LIMITED", **kwargs)


class LLMBadRequest(LLMError):
    """Invalid request (e.g. schema, params, unsupported media type)."""

    def __init__(self, message: str = "400 LLM bad request", **kwargs: object) -> None:
        kwargs.setdefault("status_code", 400)
        super().__init__(message, code="BAD_REQUEST", **kwargs)


class LLMAuthError(LLMError):
    """Missing key, authentication or authorization failure."""

    def __init__(self, message: str = "LLM auth error", **kwargs: object) -> None:
        super().__init__(message, code="AUTH_ERROR", **kwargs)


class LLMUnavailable(LLMError):
    """Service unavailable (5xx, connection, etc.)."""

    def __init__(self, message: str = "503 LLM unavailable", **kwargs: object) -> None:
        super().__init__(message, code="UNAVAILABLE", **kwargs)
