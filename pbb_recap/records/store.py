"""In-memory record store: the process-lifetime record list plus the single error banner."""
from __future__ import annotations

import threading
from typing import Iterable

from pbb_recap.records.models import TaxRecord, ValidationSummary
from pbb_recap.records.summary import generate_summary


class RecordStore:
    """Ordered list of committed records. Thread-safe; nothing is persisted."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[TaxRecord] = []
        self._error: str | None = None

    def extend(self, records: Iterable[TaxRecord]) -> int:
        """Append records in order; returns how many were added."""
        batch = list(records)
        with self._lock:
            self._records.extend(batch)
        return len(batch)

    def records(self) -> list[TaxRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        """Drop all records and the error banner."""
        with self._lock:
            self._records.clear()
            self._error = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def error(self) -> str | None:
        with self._lock:
            return self._error

    def set_error(self, message: str | None) -> None:
        """Replace the error banner (None hides it)."""
        with self._lock:
            self._error = message

    def summary(self) -> ValidationSummary:
        return generate_summary(self.records())
