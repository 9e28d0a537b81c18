"""Upload orchestrator: process a batch of documents one at a time and commit the records."""
from __future__ import annotations

import asyncio
import base64
import logging
from typing import Awaitable, Callable, Sequence

from pbb_recap.extraction.extract import TaxDocumentExtractor
from pbb_recap.orchestrator.contracts import DocumentExtractorPort
from pbb_recap.orchestrator.errors import ProcessingFailedError, UploadError, classify_failure
from pbb_recap.orchestrator.models import BatchResult, UploadedDocument
from pbb_recap.orchestrator.settings import OrchestratorSettings
from pbb_recap.records.models import TaxRecord
from pbb_recap.records.store import RecordStore

logger = logging.getLogger(__name__)


class UploadOrchestrator:
    """
    Sequential batch processing against the extraction client.

    Document i+1 is not read or submitted until document i has resolved, with
    a fixed pause in between to ease rate limits. The first failure aborts the
    rest of the batch. Records are buffered and committed to the store only when
    every document succeeded, unless commit_partial_on_failure is set.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        settings: OrchestratorSettings | None = None,
        extractor: DocumentExtractorPort | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._store = store
        self._settings = settings or OrchestratorSettings()
        self._extractor = extractor or TaxDocumentExtractor()
        self._sleep = sleep

    def _is_allowed(self, mime_type: str) -> bool:
        return any(mime_type.startswith(prefix) for prefix in self._settings.allowed_mime_prefixes)

    async def _process_one(self, doc: UploadedDocument, *, api_key: str | None) -> list[TaxRecord]:
        mime_type = doc.resolved_mime_type()
        if not self._is_allowed(mime_type):
            logger.warning("Unsupported media type %s for %s", mime_type, doc.filename)
            raise ProcessingFailedError(document=doc.filename)
        file_base64 = base64.b64encode(doc.content).decode("ascii")
        return await self._extractor.extract(
            file_base64,
            mime_type,
            api_key=api_key,
            document=doc.filename,
        )

    def _abort(self, failure: UploadError, buffered: list[TaxRecord], processed: int, total: int) -> None:
        logger.error(
            "Batch aborted at %s (%d/%d done, code=%s)",
            failure.document,
            processed,
            total,
            failure.code,
            exc_info=failure.__cause__ or failure,
        )
        if self._settings.commit_partial_on_failure and buffered:
            added = self._store.extend(buffered)
            logger.info("Committed %d record(s) extracted before the failure", added)
        self._store.set_error(failure.message)

    async def process_batch(
        self,
        documents: Sequence[UploadedDocument],
        *,
        api_key: str | None = None,
    ) -> BatchResult:
        """Process documents in order. Raises QuotaExceededError or ProcessingFailedError on failure."""
        if not documents:
            return BatchResult(total_records=len(self._store))

        self._store.set_error(None)
        buffered: list[TaxRecord] = []
        processed = 0
        for index, doc in enumerate(documents):
            if index > 0 and self._settings.inter_file_delay_s > 0:
                await self._sleep(self._settings.inter_file_delay_s)
            try:
                records = await self._process_one(doc, api_key=api_key)
            except Exception as e:
                failure = classify_failure(e, document=doc.filename)
                if failure is not e:
                    failure.__cause__ = e
                self._abort(failure, buffered, processed, len(documents))
                raise failure
            buffered.extend(records)
            processed += 1

        added = self._store.extend(buffered)
        logger.info("Batch committed: %d file(s), %d record(s)", processed, added)
        return BatchResult(
            files_processed=processed,
            records_added=added,
            total_records=len(self._store),
        )
