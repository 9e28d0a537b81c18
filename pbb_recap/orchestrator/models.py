"""DTOs used by the orchestrator."""
from __future__ import annotations

import mimetypes
from pathlib import Path

from pydantic import BaseModel


class UploadedDocument(BaseModel):
    """One uploaded file: raw bytes plus its media type."""

    filename: str
    content: bytes
    mime_type: str = ""

    @classmethod
    def from_path(cls, path: Path) -> "UploadedDocument":
        path = Path(path)
        return cls(filename=path.name, content=path.read_bytes(), mime_type=guess_mime_type(path.name))

    def resolved_mime_type(self) -> str:
        return self.mime_type or guess_mime_type(self.filename)


def guess_mime_type(filename: str) -> str:
    mime, _ = mimetypes.guess_type(filename)
    return mime or "application/octet-stream"


class BatchResult(BaseModel):
    """Outcome of one committed batch."""

    files_processed: int = 0
    records_added: int = 0
    total_records: int = 0
