"""Extraction: PBB-P2 document -> TaxRecords (prompt, schema constraint, normalization)."""
from pbb_recap.extraction.errors import ExtractionError, ExtractionParseError
from pbb_recap.extraction.extract import TaxDocumentExtractor, extract_tax_records

__all__ = ["ExtractionError", "ExtractionParseError", "TaxDocumentExtractor", "extract_tax_records"]
