"""Normalize extracted items into fixed-year TaxRecords."""
from __future__ import annotations

from typing import Iterable, Sequence

from pbb_recap.extraction.schema import ExtractedItem
from pbb_recap.records.models import Arrears, TaxRecord, positive_total


def build_arrears(item: ExtractedItem, years: Sequence[int]) -> Arrears:
    """
    One entry per configured year: None where the document has no value, the
    literal amount (explicit 0 included) otherwise. Years outside the range are dropped.
    """
    arrears: Arrears = {year: None for year in years}
    for entry in item.arrears:
        if entry.year in arrears:
            arrears[entry.year] = entry.kurang_bayar
    return arrears


def normalize_item(item: ExtractedItem, years: Sequence[int]) -> TaxRecord:
    arrears = build_arrears(item, years)
    return TaxRecord(
        nama=item.nama,
        nop=item.nop,
        arrears=arrears,
        total=positive_total(arrears.values()),
        notes=[],
    )


def normalize_items(items: Iterable[ExtractedItem], years: Sequence[int]) -> list[TaxRecord]:
    return [normalize_item(item, years) for item in items]
