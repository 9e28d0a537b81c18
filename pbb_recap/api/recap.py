"""Recap API: upload documents, list/clear records, validation summary, CSV export."""
from __future__ import annotations

import asyncio
import logging

from flask import Blueprint, Response, current_app, jsonify, request

from pbb_recap.orchestrator.errors import QuotaExceededError, UploadError
from pbb_recap.orchestrator.models import UploadedDocument
from pbb_recap.records.export import CSV_MEDIA_TYPE, EmptyExportError, export_csv, export_filename

logger = logging.getLogger(__name__)

bp = Blueprint("recap", __name__, url_prefix="/api")

API_KEY_HEADER = "X-Gemini-Api-Key"


def _state():
    return current_app.extensions["pbb_recap"]


@bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@bp.route("/documents", methods=["POST"])
def upload_documents():
    """POST /api/documents. Multipart field `files`; optional personal key in X-Gemini-Api-Key."""
    files = [f for f in request.files.getlist("files") if f and f.filename]
    if not files:
        return jsonify({"error": "files required"}), 400

    documents = []
    for f in files:
        mime_type = f.mimetype if f.mimetype and f.mimetype != "application/octet-stream" else ""
        documents.append(UploadedDocument(filename=f.filename, content=f.read(), mime_type=mime_type))

    state = _state()
    api_key = request.headers.get(API_KEY_HEADER) or None
    try:
        result = asyncio.run(state.orchestrator.process_batch(documents, api_key=api_key))
    except UploadError as e:
        status = 429 if isinstance(e, QuotaExceededError) else 422
        return jsonify({"error": e.message, "code": e.code, "document": e.document}), status
    return jsonify(result.model_dump())


@bp.route("/records", methods=["GET"])
def list_records():
    state = _state()
    return jsonify(
        {
            "records": [r.model_dump(mode="json") for r in state.store.records()],
            "summary": state.store.summary().model_dump(),
            "error": state.store.error,
            "years": state.record_settings.years,
        }
    )


@bp.route("/records", methods=["DELETE"])
def clear_records():
    _state().store.clear()
    return "", 204


@bp.route("/summary", methods=["GET"])
def summary():
    return jsonify(_state().store.summary().model_dump())


@bp.route("/export.csv", methods=["GET"])
def export():
    state = _state()
    settings = state.record_settings
    try:
        content = export_csv(state.store.records(), settings.years)
    except EmptyExportError as e:
        return jsonify({"error": str(e)}), 404
    filename = export_filename(settings.export_filename_prefix)
    logger.info("Exporting %d record(s) to %s", len(state.store), filename)
    return Response(
        content.encode("utf-8"),
        content_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
