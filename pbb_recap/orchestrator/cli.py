"""CLI harness: extract a batch of PBB-P2 documents to CSV, or serve the HTTP API."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pbb_recap.extraction.extract import TaxDocumentExtractor
from pbb_recap.llm.client_litellm import LiteLLMClient
from pbb_recap.llm.settings import LLMSettings
from pbb_recap.orchestrator.errors import UploadError
from pbb_recap.orchestrator.models import UploadedDocument
from pbb_recap.orchestrator.orchestrator import UploadOrchestrator
from pbb_recap.orchestrator.settings import OrchestratorSettings
from pbb_recap.records.export import export_csv, export_filename
from pbb_recap.records.settings import RecordSettings
from pbb_recap.records.store import RecordStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)
    if debug:
        import litellm
        litellm._turn_on_debug()


def _print_summary(store: RecordStore) -> None:
    summary = store.summary()
    print(f"records={summary.total_records}")
    if summary.duplicates:
        print(f"duplicate_nops={', '.join(summary.duplicates)}")
    for anomaly in summary.anomalies:
        print(f"anomaly: {anomaly}")


def _cmd_extract(args: argparse.Namespace) -> int:
    paths = [Path(p).resolve() for p in args.files]
    missing = [p for p in paths if not p.exists()]
    if missing:
        print(f"Error: file not found: {missing[0]}", file=sys.stderr)
        return 1

    record_settings = RecordSettings()
    store = RecordStore()
    extractor = TaxDocumentExtractor(LiteLLMClient(LLMSettings()), years=record_settings.years)
    orch = UploadOrchestrator(store, settings=OrchestratorSettings(), extractor=extractor)
    documents = [UploadedDocument.from_path(p) for p in paths]

    try:
        result = asyncio.run(orch.process_batch(documents, api_key=args.api_key))
    except UploadError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"files_processed={result.files_processed}")
    _print_summary(store)
    if not result.records_added:
        print("No records extracted; nothing written.", file=sys.stderr)
        return 0

    output = Path(args.output) if args.output else Path(export_filename(record_settings.export_filename_prefix))
    output.write_text(export_csv(store.records(), record_settings.years), encoding="utf-8")
    print(f"csv={output}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from pbb_recap.api.app import create_app

    app = create_app()
    app.run(host=args.host, port=args.port, debug=False)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="PBB-P2 arrears recap: extract documents to CSV")
    parser.add_argument("--debug", action="store_true", help="Debug logging (LiteLLM verbose too)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_extract = sub.add_parser("extract", help="Process files as one batch and write the CSV recap")
    p_extract.add_argument("files", nargs="+", help="PDF or image files")
    p_extract.add_argument("--output", "-o", default=None, help="CSV path (default: dated recap filename)")
    p_extract.add_argument("--api-key", default=None, help="Personal Gemini API key (overrides LLM_GEMINI_API_KEY)")
    p_extract.set_defaults(func=_cmd_extract)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    p_serve.add_argument("--port", "-p", type=int, default=8000, help="Port (default: 8000)")
    p_serve.set_defaults(func=_cmd_serve)

    args = parser.parse_args(argv)
    configure_logging(args.debug)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
