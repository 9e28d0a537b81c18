"""Upload orchestrator: sequential batch extraction committed to the record store."""
from pbb_recap.orchestrator.errors import ProcessingFailedError, QuotaExceededError, UploadError
from pbb_recap.orchestrator.models import BatchResult, UploadedDocument
from pbb_recap.orchestrator.orchestrator import UploadOrchestrator
from pbb_recap.orchestrator.settings import OrchestratorSettings

__all__ = [
    "UploadOrchestrator",
    "OrchestratorSettings",
    "UploadedDocument",
    "BatchResult",
    "UploadError",
    "QuotaExceededError",
    "ProcessingFailedError",
]
