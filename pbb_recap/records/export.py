"""
CSV export of the record list.

Layout: header `Nama,NOP,<year>...,Total`; the name is double-quoted, the NOP
gets a leading apostrophe so spreadsheets keep it as text, an empty cell
marks a year without data. The content starts with a UTF-8 BOM.
"""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Sequence

from pbb_recap.records.models import TaxRecord

BOM = "\ufeff"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


class EmptyExportError(ValueError):
    """Raised when there are no records to export."""


def format_number(value: float | int | None) -> str:
    """Render integral amounts without a decimal part (500.0 -> '500'); None -> ''."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def csv_header(years: Sequence[int]) -> str:
    return ",".join(["Nama", "NOP", *(str(y) for y in years), "Total"])


def csv_row(record: TaxRecord, years: Sequence[int]) -> str:
    cells = [
        _quote(record.nama),
        f"'{record.nop}",
        *(format_number(record.arrears.get(year)) for year in years),
        format_number(record.total),
    ]
    return ",".join(cells)


def export_csv(records: Sequence[TaxRecord], years: Sequence[int]) -> str:
    """Full CSV text, BOM included. Raises EmptyExportError for an empty list."""
    if not records:
        raise EmptyExportError("No records to export")
    lines = [csv_header(years), *(csv_row(r, years) for r in records)]
    return BOM + "\n".join(lines)


def export_filename(prefix: str = "Rekap_Piutang_Kampar", today: date | None = None) -> str:
    """Dated CSV name; the stamp is the current UTC date unless today is given."""
    stamp = (today or datetime.now(timezone.utc).date()).isoformat()
    return f"{prefix}_{stamp}.csv"
