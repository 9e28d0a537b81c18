"""Exception mapping tests. Map by class name; mapped messages carry the HTTP status."""
from pbb_recap.llm.client_litellm import _map_exception
from pbb_recap.llm.errors import LLMError
from pbb_recap.llm.retry import is_retryable_error
from pbb_recap.llm.types import LLMProvider


def test_map_timeout() -> None:
    """APITimeoutError / Timeout -> LLMTimeout, not retried (no status in message)."""
    class APITimeoutError(Exception):
        pass
    out = _map_exception(APITimeoutError("request timed out"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMTimeout"
    assert out.provider == LLMProvider.GEMINI
    assert "APITimeoutError" in (out.details or "")
    assert is_retryable_error(out) is False


def test_map_rate_limit() -> None:
    """RateLimitError -> LLMRateLimited with 429 in the message."""
    class RateLimitError(Exception):
        pass
    out = _map_exception(RateLimitError("quota exhausted"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMRateLimited"
    assert out.status_code == 429
    assert "429" in str(out)
    assert is_retryable_error(out) is True


def test_map_internal_server_error() -> None:
    class InternalServerError(Exception):
        pass
    out = _map_exception(InternalServerError("boom"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMUnavailable"
    assert str(out).startswith("500 ")
    assert is_retryable_error(out) is True


def test_map_service_unavailable() -> None:
    class ServiceUnavailableError(Exception):
        pass
    out = _map_exception(ServiceUnavailableError("overloaded"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMUnavailable"
    assert "503" in str(out)


def test_status_not_duplicated_when_already_in_message() -> None:
    class RateLimitError(Exception):
        pass
    out = _map_exception(RateLimitError("Error 429: RESOURCE_EXHAUSTED"), LLMProvider.GEMINI)
    assert str(out) == "Error 429: RESOURCE_EXHAUSTED"


def test_map_auth_error() -> None:
    """AuthenticationError -> LLMAuthError, not retried."""
    class AuthenticationError(Exception):
        status_code = 401
    out = _map_exception(AuthenticationError("invalid key"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMAuthError"
    assert out.status_code == 401
    assert is_retryable_error(out) is False


def test_map_bad_request() -> None:
    """BadRequestError -> LLMBadRequest."""
    class BadRequestError(Exception):
        pass
    out = _map_exception(BadRequestError("bad params"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMBadRequest"
    assert is_retryable_error(out) is False


def test_map_unknown_with_5xx_status_code() -> None:
    class WeirdError(Exception):
        status_code = 503
    out = _map_exception(WeirdError("gateway"), LLMProvider.GEMINI)
    assert type(out).__name__ == "LLMUnavailable"
    assert "503" in str(out)


def test_map_unknown_exception() -> None:
    out = _map_exception(ValueError("something else"), LLMProvider.GEMINI)
    assert out.code == "UNKNOWN"
    assert "ValueError" in (out.details or "")


def test_llm_error_passthrough() -> None:
    err = LLMError("already mapped", code="X")
    assert _map_exception(err, LLMProvider.GEMINI) is err
