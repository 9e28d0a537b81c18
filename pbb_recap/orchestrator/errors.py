"""User-facing upload errors. The original exception is kept as __cause__."""

from pbb_recap.extraction.errors import ExtractionError

QUOTA_EXCEEDED_MESSAGE = (
    "Kuota API sistem saat ini penuh (Rate Limit Exceeded). Silakan gunakan 'API Key Sendiri' "
    "dari Google AI Studio atau coba lagi dalam beberapa menit."
)
PROCESSING_FAILED_MESSAGE = (
    "Gagal memproses file. Pastikan dokumen jelas dan format PDF/Gambar didukung."
)


class UploadError(Exception):
    """Base exception for batch upload failures. message is shown to the user as is."""

    def __init__(self, message: str, *, code: str = "UPLOAD_ERROR", document: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.document = document


class QuotaExceededError(UploadError):
    """Model rate limit or quota exhausted (429); remedy is a personal API key or waiting."""

    def __init__(self, message: str = QUOTA_EXCEEDED_MESSAGE, *, document: str | None = None) -> None:
        super().__init__(message, code="QUOTA_EXCEEDED", document=document)


class ProcessingFailedError(UploadError):
    """Any other failure: unreadable document, bad response, unsupported format, auth."""

    def __init__(self, message: str = PROCESSING_FAILED_MESSAGE, *, document: str | None = None) -> None:
        super().__init__(message, code="PROCESSING_FAILED", document=document)


def classify_failure(exc: BaseException, *, document: str | None = None) -> UploadError:
    """Map any extraction failure to one of the two user-facing categories."""
    if isinstance(exc, UploadError):
        return exc
    if isinstance(exc, ExtractionError):
        # parse messages may quote amounts; never read them as a status code
        return ProcessingFailedError(document=document)
    if "429" in str(exc):
        return QuotaExceededError(document=document)
    return ProcessingFailedError(document=document)
