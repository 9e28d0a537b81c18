"""Minimal Protocols the orchestrator depends on (not concrete implementations)."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from pbb_recap.records.models import TaxRecord


@runtime_checkable
class DocumentExtractorPort(Protocol):
    """Extract TaxRecords from one base64-encoded document."""

    async def extract(
        self,
        file_base64: str,
        mime_type: str,
        *,
        api_key: str | None = None,
        document: str | None = None,
    ) -> list[TaxRecord]:
        ...
