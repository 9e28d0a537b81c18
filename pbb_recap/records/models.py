"""TaxRecord and ValidationSummary models."""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

# Amount per year; None is the explicit "no data" marker (never fabricated as 0).
Arrears = dict[int, float | None]


def positive_total(amounts: Iterable[float | None]) -> float:
    """Sum of strictly positive amounts; zero, negative and None contribute nothing."""
    return sum(v for v in amounts if v is not None and v > 0)


class TaxRecord(BaseModel):
    """One taxed object (NOP) with its yearly arrears."""

    nama: str = Field(..., description="Nama Wajib Pajak")
    nop: str = Field(..., description="Nomor Objek Pajak")
    arrears: Arrears = Field(default_factory=dict, description="Kurang Bayar per year")
    total: float = 0
    notes: list[str] = Field(default_factory=list)

    def recomputed_total(self) -> float:
        return positive_total(self.arrears.values())


class ValidationSummary(BaseModel):
    """Derived from the current record list; never stored."""

    total_records: int = 0
    duplicates: list[str] = Field(default_factory=list)
    anomalies: list[str] = Field(default_factory=list)
