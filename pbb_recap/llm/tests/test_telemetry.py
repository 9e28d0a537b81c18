"""Redaction and structured call logs."""
import logging

from pbb_recap.llm.telemetry import log_llm_call, log_retry, redact_preview


def test_redact_google_key_and_query_param() -> None:
    key = "AIza" + "A" * 35
    out = redact_preview(f"bad key {key} at https://x/v1?key={key}&alt=json")
    assert key not in out
    assert "?key=[REDACTED]&alt=json" in out


def test_redact_bearer_and_truncate() -> None:
    out = redact_preview("Authorization: Bearer abc.def " + "x" * 300)
    assert "abc.def" not in out
    assert out.endswith("...")
    assert redact_preview("") == ""


def test_log_llm_call_extra_fields(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="pbb_recap.llm.telemetry"):
        log_llm_call(provider="gemini", model="gemini/x", latency_ms=12, status="FAILED", attempts=3,
                     document="a.pdf", error_code="RATE_LIMITED")
    rec = caplog.records[-1]
    assert rec.getMessage() == "llm_call"
    assert rec.attempts == 3
    assert rec.document == "a.pdf"
    assert rec.error_code == "RATE_LIMITED"


def test_log_retry_is_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="pbb_recap.llm.telemetry"):
        log_retry(label="call", attempt=1, delay_s=2.0, error=RuntimeError("429 quota"))
    rec = caplog.records[-1]
    assert rec.levelno == logging.WARNING
    assert "Retrying in 2000ms" in rec.getMessage()
