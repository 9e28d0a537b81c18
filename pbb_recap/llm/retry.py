"""
Bounded retry with exponential backoff.

Retryable errors are detected by the HTTP status in the error message
(429, 500, 503). Delays start at initial_delay_s and are multiplied after
every retry, without jitter: 2s, 4s, 8s with the defaults. A non-retryable
error, or the last attempt failing, propagates to the caller unchanged.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, TypeVar

from pbb_recap.llm.settings import LLMSettings
from pbb_recap.llm.telemetry import log_retry

T = TypeVar("T")

RETRYABLE_STATUS_MARKERS = ("429", "500", "503")

SleepFn = Callable[[float], Awaitable[None]]


def is_retryable_error(exc: BaseException) -> bool:
    """True when the error message mentions a rate-limit or transient server status."""
    message = str(exc)
    return any(marker in message for marker in RETRYABLE_STATUS_MARKERS)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry parameters. max_attempts counts the first call."""

    max_attempts: int = 3
    initial_delay_s: float = 2.0
    multiplier: float = 2.0
    is_retryable: Callable[[BaseException], bool] = field(default=is_retryable_error)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "RetryPolicy":
        return cls(
            max_attempts=settings.max_attempts,
            initial_delay_s=settings.retry_initial_delay_s,
            multiplier=settings.retry_backoff_multiplier,
        )

    def delays(self) -> list[float]:
        """Delays slept between attempts, in order (one fewer than max_attempts)."""
        out: list[float] = []
        delay = self.initial_delay_s
        for _ in range(self.max_attempts - 1):
            out.append(delay)
            delay *= self.multiplier
        return out


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    sleep: SleepFn = asyncio.sleep,
    label: str = "llm_call",
) -> T:
    """Await fn() until it succeeds, fails non-retryably, or attempts run out."""
    policy = policy or RetryPolicy()
    delay = policy.initial_delay_s
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await fn()
        except Exception as e:
            if attempt == policy.max_attempts or not policy.is_retryable(e):
                raise
            log_retry(label=label, attempt=attempt, delay_s=delay, error=e)
            await sleep(delay)
            delay *= policy.multiplier
    # max_attempts >= 1, the loop either returns or raises
    raise RuntimeError("Max retries exceeded")
