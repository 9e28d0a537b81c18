"""Document extraction: call the model with the schema constraint, parse JSON, normalize to TaxRecords."""
from __future__ import annotations

import logging
from typing import Sequence

from pbb_recap.extraction.prompt import PROMPT_VERSION, build_extraction_messages
from pbb_recap.extraction.normalize import normalize_items
from pbb_recap.extraction.schema import parse_extraction, response_format
from pbb_recap.llm.client_litellm import LiteLLMClient
from pbb_recap.llm.ports import LLMClientPort
from pbb_recap.llm.types import LLMMessage, LLMRequest
from pbb_recap.records.models import TaxRecord
from pbb_recap.records.settings import RecordSettings

logger = logging.getLogger(__name__)


def build_request(file_base64: str, mime_type: str, *, document: str | None = None) -> LLMRequest:
    metadata = {"prompt_version": PROMPT_VERSION}
    if document:
        metadata["document"] = document
    return LLMRequest(
        messages=[LLMMessage(**m) for m in build_extraction_messages(file_base64, mime_type)],
        response_format=response_format(),
        metadata=metadata,
    )


async def extract_tax_records(
    file_base64: str,
    mime_type: str,
    *,
    client: LLMClientPort | None = None,
    years: Sequence[int] | None = None,
    api_key: str | None = None,
    document: str | None = None,
) -> list[TaxRecord]:
    """
    Extract arrears records from one base64-encoded document.

    Transient model errors are retried by the client; anything else propagates.
    Raises ExtractionParseError when the response is not the expected JSON array.
    """
    client = client or LiteLLMClient()
    years = list(years) if years is not None else RecordSettings().years
    req = build_request(file_base64, mime_type, document=document)
    resp = await client.acompletion(req, api_key=api_key)
    items = parse_extraction(resp.text)
    records = normalize_items(items, years)
    logger.info(
        "Extracted %d record(s) from %s (model=%s, attempts=%d)",
        len(records),
        document or mime_type,
        resp.model,
        resp.attempts,
    )
    return records


class TaxDocumentExtractor:
    """Bound extractor: one client and year range shared across a batch."""

    def __init__(self, client: LLMClientPort | None = None, years: Sequence[int] | None = None) -> None:
        self._client = client or LiteLLMClient()
        self._years = list(years) if years is not None else RecordSettings().years

    async def extract(
        self,
        file_base64: str,
        mime_type: str,
        *,
        api_key: str | None = None,
        document: str | None = None,
    ) -> list[TaxRecord]:
        return await extract_tax_records(
            file_base64,
            mime_type,
            client=self._client,
            years=self._years,
            api_key=api_key,
            document=document,
        )
