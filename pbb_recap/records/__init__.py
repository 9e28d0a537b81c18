"""Records: TaxRecord model, in-memory store, validation summary, CSV export."""
from pbb_recap.records.export import EmptyExportError, export_csv, export_filename
from pbb_recap.records.models import TaxRecord, ValidationSummary, positive_total
from pbb_recap.records.settings import RecordSettings
from pbb_recap.records.store import RecordStore
from pbb_recap.records.summary import generate_summary

__all__ = [
    "TaxRecord",
    "ValidationSummary",
    "RecordSettings",
    "RecordStore",
    "EmptyExportError",
    "export_csv",
    "export_filename",
    "generate_summary",
    "positive_total",
]
