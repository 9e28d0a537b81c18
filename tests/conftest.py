"""Pytest config and fixtures for the recap pipeline tests."""
from __future__ import annotations

import pytest

from pbb_recap.llm.types import LLMProvider, LLMResponse
from pbb_recap.orchestrator.models import UploadedDocument
from pbb_recap.orchestrator.orchestrator import UploadOrchestrator
from pbb_recap.orchestrator.settings import OrchestratorSettings
from pbb_recap.records.models import TaxRecord
from pbb_recap.records.settings import RecordSettings
from pbb_recap.records.store import RecordStore

YEARS = [2020, 2021, 2022]


class FakeLLMClient:
    """LLMClientPort double: returns canned texts (or raises canned errors) and records requests."""

    def __init__(self, outcomes: list) -> None:
        self.outcomes = list(outcomes)
        self.requests: list = []
        self.api_keys: list[str | None] = []

    async def acompletion(self, req, *, api_key=None) -> LLMResponse:
        self.requests.append(req)
        self.api_keys.append(api_key)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return LLMResponse(text=outcome, provider=LLMProvider.GEMINI, model="gemini/fake", latency_ms=1)


class FakeExtractor:
    """DocumentExtractorPort double keyed by filename; a value that is an exception is raised."""

    def __init__(self, results: dict) -> None:
        self.results = results
        self.calls: list[tuple[str, str, str | None]] = []

    async def extract(self, file_base64, mime_type, *, api_key=None, document=None):
        self.calls.append((document, mime_type, api_key))
        outcome = self.results[document]
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)


def make_record(nop: str, arrears: dict, *, nama: str = "Budi", total: float | None = None) -> TaxRecord:
    """TaxRecord with the stored total derived from arrears unless given."""
    if total is None:
        total = sum(v for v in arrears.values() if v is not None and v > 0)
    return TaxRecord(nama=nama, nop=nop, arrears=arrears, total=total)


def make_document(filename: str, mime_type: str = "application/pdf") -> UploadedDocument:
    return UploadedDocument(filename=filename, content=b"%PDF-1.4 fake", mime_type=mime_type)


@pytest.fixture
def record_settings() -> RecordSettings:
    return RecordSettings(start_year=YEARS[0], end_year=YEARS[-1])


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_orchestrator(store: RecordStore, sleep: RecordingSleep):
    """Factory: orchestrator over the shared store with a fake extractor and recorded sleeps."""

    def _make(results: dict, **settings) -> tuple[UploadOrchestrator, FakeExtractor]:
        extractor = FakeExtractor(results)
        orch = UploadOrchestrator(
            store,
            settings=OrchestratorSettings(**settings),
            extractor=extractor,
            sleep=sleep,
        )
        return orch, extractor

    return _make
