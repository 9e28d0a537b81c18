"""
LLM module: single typed async interface for the model calls.
Public API: LiteLLMClient, LLMRequest, LLMResponse, RetryPolicy, with_retry.
Other modules must not call LiteLLM or provider SDKs directly.
"""
from pbb_recap.llm.client_litellm import LiteLLMClient
from pbb_recap.llm.errors import (
    LLMAuthError,
    LLMBadRequest,
    LLMError,
    LLMRateLimited,
    LLMTimeout,
    LLMUnavailable,
)
from pbb_recap.llm.ports import LLMClientPort
from pbb_recap.llm.retry import RetryPolicy, is_retryable_error, with_retry
from pbb_recap.llm.settings import LLMSettings
from pbb_recap.llm.types import LLMMessage, LLMProvider, LLMRequest, LLMResponse, LLMUsage

__all__ = [
    "LiteLLMClient",
    "LLMClientPort",
    "LLMSettings",
    "LLMRequest",
    "LLMResponse",
    "LLMMessage",
    "LLMProvider",
    "LLMUsage",
    "RetryPolicy",
    "with_retry",
    "is_retryable_error",
    "LLMError",
    "LLMTimeout",
    "LLMRateLimited",
    "LLMBadRequest",
    "LLMAuthError",
    "LLMUnavailable",
]
