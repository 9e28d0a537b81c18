"""Extraction-specific exceptions."""


class ExtractionError(Exception):
    """Base exception for document extraction failures."""

    def __init__(self, message: str, *, code: str = "EXTRACTION_ERROR") -> None:
        super().__init__(message)
        self.code = code


class ExtractionParseError(ExtractionError):
    """Model response body is not the expected JSON array. Fatal for the document, never retried."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="PARSE_ERROR")
