"""Flask app factory. One in-memory record store per process."""
from __future__ import annotations

from dataclasses import dataclass

from flask import Flask

from pbb_recap.api.recap import bp as recap_bp
from pbb_recap.extraction.extract import TaxDocumentExtractor
from pbb_recap.llm.client_litellm import LiteLLMClient
from pbb_recap.orchestrator.orchestrator import UploadOrchestrator
from pbb_recap.records.settings import RecordSettings
from pbb_recap.records.store import RecordStore


@dataclass
class RecapState:
    """Per-app state shared by the recap endpoints."""

    store: RecordStore
    orchestrator: UploadOrchestrator
    record_settings: RecordSettings


def create_app(
    *,
    store: RecordStore | None = None,
    orchestrator: UploadOrchestrator | None = None,
    record_settings: RecordSettings | None = None,
) -> Flask:
    if record_settings is None:
        record_settings = RecordSettings()
    if store is None:
        store = RecordStore()
    if orchestrator is None:
        extractor = TaxDocumentExtractor(LiteLLMClient(), years=record_settings.years)
        orchestrator = UploadOrchestrator(store, extractor=extractor)

    app = Flask(__name__)
    app.extensions["pbb_recap"] = RecapState(
        store=store,
        orchestrator=orchestrator,
        record_settings=record_settings,
    )
    app.register_blueprint(recap_bp)
    return app
