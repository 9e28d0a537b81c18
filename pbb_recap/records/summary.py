"""Validation summary: duplicate NOPs and total mismatches. Pure, recomputed on every call."""
from __future__ import annotations

from typing import Sequence

from pbb_recap.records.models import TaxRecord, ValidationSummary

TOTAL_TOLERANCE = 0.01


def find_duplicate_nops(nops: Sequence[str]) -> list[str]:
    """NOPs that appear more than once, each reported once, in order of their first repeat."""
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for nop in nops:
        if nop in seen:
            duplicates[nop] = None
        else:
            seen.add(nop)
    return list(duplicates)


def find_total_anomalies(records: Sequence[TaxRecord], tolerance: float = TOTAL_TOLERANCE) -> list[str]:
    anomalies: list[str] = []
    for record in records:
        if abs(record.recomputed_total() - record.total) > tolerance:
            anomalies.append(f"Ketidaksesuaian total untuk NOP {record.nop}")
    return anomalies


def generate_summary(records: Sequence[TaxRecord]) -> ValidationSummary:
    return ValidationSummary(
        total_records=len(records),
        duplicates=find_duplicate_nops([r.nop for r in records]),
        anomalies=find_total_anomalies(records),
    )
