"""CSV export layout."""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from conftest import make_record

from pbb_recap.records.export import (
    BOM,
    EmptyExportError,
    csv_header,
    export_csv,
    export_filename,
    format_number,
)

YEARS = [2020, 2021, 2022]


def test_row_layout():
    record = make_record("123", {2020: None, 2021: None, 2022: 500}, nama="Budi")
    content = export_csv([record], YEARS)
    assert content.startswith(BOM)
    lines = content[len(BOM):].split("\n")
    assert lines[0] == "Nama,NOP,2020,2021,2022,Total"
    assert lines[1] == "\"Budi\",'123,,,500,500"


def test_header_follows_year_range():
    assert csv_header([2014, 2015]) == "Nama,NOP,2014,2015,Total"


def test_quotes_in_name_doubled():
    record = make_record("9", {2022: 10}, nama='PT "Maju" Jaya')
    line = export_csv([record], YEARS).split("\n")[1]
    assert line.startswith('"PT ""Maju"" Jaya",')


def test_explicit_zero_differs_from_missing():
    record = make_record("1", {2020: 0, 2021: None, 2022: 12.5})
    line = export_csv([record], YEARS).split("\n")[1]
    assert line.endswith(",'1,0,,12.5,12.5")


def test_rows_in_store_order_without_trailing_newline():
    records = [make_record("B", {}), make_record("A", {})]
    content = export_csv(records, YEARS)
    assert not content.endswith("\n")
    assert [line.split(",")[1] for line in content.split("\n")[1:]] == ["'B", "'A"]


@pytest.mark.parametrize("value, expected", [(500.0, "500"), (12.25, "12.25"), (0, "0"), (None, ""), (7, "7")])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_empty_export_refused():
    with pytest.raises(EmptyExportError):
        export_csv([], YEARS)


def test_filename():
    assert export_filename(today=date(2025, 3, 7)) == "Rekap_Piutang_Kampar_2025-03-07.csv"
    assert export_filename("Rekap", date(2024, 12, 31)) == "Rekap_2024-12-31.csv"


def test_default_filename_uses_utc_date():
    assert export_filename() == f"Rekap_Piutang_Kampar_{datetime.now(timezone.utc).date().isoformat()}.csv"
