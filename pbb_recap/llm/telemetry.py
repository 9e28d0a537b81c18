"""Observability: redaction and structured logging for model calls. Never log prompt text or API keys."""
from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_SECRET_PATTERNS = [
    re.compile(r"\b(?:AIza[a-zA-Z0-9_-]{35})\b"),  # Google API key style
    re.compile(r"\b(?:sk-[a-zA-Z0-9]{20,})\b", re.IGNORECASE),
    re.compile(r"\bBearer\s+[a-zA-Z0-9_.-]+\b", re.IGNORECASE),
    re.compile(r"([?&]key=)[^&\s]+", re.IGNORECASE),
]
_PREVIEW_MAX_CHARS = 200


def redact_preview(text: str) -> str:
    """Redact secrets, then truncate. Use for any provider text that ends up in logs."""
    if not text:
        return ""
    out = text
    for pat in _SECRET_PATTERNS:
        if pat.groups:
            out = pat.sub(r"\1[REDACTED]", out)
        else:
            out = pat.sub("[REDACTED]", out)
    if len(out) > _PREVIEW_MAX_CHARS:
        out = out[:_PREVIEW_MAX_CHARS] + "..."
    return out


def log_llm_call(
    *,
    provider: str,
    model: str,
    latency_ms: int,
    status: str,
    attempts: int = 1,
    document: str | None = None,
    error_code: str | None = None,
) -> None:
    """Emit structured log for one model call (after retries)."""
    extra: dict[str, Any] = {
        "provider": provider,
        "model": model,
        "latency_ms": latency_ms,
        "status": status,
        "attempts": attempts,
    }
    if document is not None:
        extra["document"] = document
    if error_code is not None:
        extra["error_code"] = error_code
    logger.info("llm_call", extra=extra)


def log_retry(*, label: str, attempt: int, delay_s: float, error: BaseException) -> None:
    logger.warning(
        "%s failed (attempt %d). Retrying in %dms: %s",
        label,
        attempt,
        int(delay_s * 1000),
        redact_preview(str(error)),
    )
