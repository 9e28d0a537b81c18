"""Response schema sent to the model, and pydantic models for the parsed payload."""
from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from pbb_recap.extraction.errors import ExtractionParseError

# Enforced by the provider through response_format; the client trusts the shape on success.
TAX_RECORD_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "nama": {"type": "string", "description": "Nama Wajib Pajak"},
            "nop": {"type": "string", "description": "Nomor Objek Pajak"},
            "arrears": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "year": {"type": "integer"},
                        "kurangBayar": {"type": "number", "description": "Nilai dari kolom Kurang Bayar"},
                    },
                    "required": ["year", "kurangBayar"],
                },
            },
        },
        "required": ["nama", "nop", "arrears"],
    },
}


def response_format() -> dict[str, Any]:
    """LiteLLM response_format carrying the JSON schema (mapped to Gemini response_schema)."""
    return {
        "type": "json_schema",
        "json_schema": {"name": "tax_records", "schema": TAX_RECORD_SCHEMA},
    }


class ExtractedArrear(BaseModel):
    year: int
    kurang_bayar: float = Field(..., alias="kurangBayar")


class ExtractedItem(BaseModel):
    nama: str
    nop: str
    arrears: list[ExtractedArrear] = Field(default_factory=list)


def _strip_json_block(raw: str) -> str:
    """Remove markdown code fence if present."""
    raw = raw.strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
    if raw.endswith("```"):
        raw = raw.rsplit("```", 1)[0]
    return raw.strip()


def parse_extraction(raw: str | None) -> list[ExtractedItem]:
    """Parse the model's JSON text. Empty text means no records. Raises ExtractionParseError on bad JSON."""
    try:
        data = json.loads(_strip_json_block(raw or "") or "[]")
    except json.JSONDecodeError as e:
        raise ExtractionParseError(f"Model response is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ExtractionParseError(f"Expected a JSON array, got {type(data).__name__}")
    try:
        return [ExtractedItem.model_validate(item) for item in data]
    except ValidationError as e:
        # ValidationError text repeats input values (taxpayer data); report locations only
        locations = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ExtractionParseError(
            f"Model response does not match the record schema: {e.error_count()} error(s) at {', '.join(locations)}"
        ) from e
