"""Extraction prompt and message builder for PBB-P2 arrears documents."""
from __future__ import annotations

from typing import Any

from pbb_recap.llm.providers import inline_document_part

PROMPT_VERSION = "pbb_p2_arrears_v1"

EXTRACTION_PROMPT = """\
Extract regional tax arrears data from this PBB-P2 document.
1. Identify the 'Nama Wajib Pajak' (Nama) and 'Nomor Objek Pajak' (NOP).
2. Extract all yearly records. Use the value from the 'Kurang Bayar' column.
3. If 'Kurang Bayar' is 0, record it as 0.
4. Normalize the data. If a year is missing in the PDF, do not invent it, just provide the ones that exist.
"""


def build_extraction_messages(file_base64: str, mime_type: str) -> list[dict[str, Any]]:
    """One user message: instruction text followed by the document itself."""
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": EXTRACTION_PROMPT},
                inline_document_part(file_base64, mime_type),
            ],
        }
    ]
