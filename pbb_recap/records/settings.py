"""Record configuration: tracked year range and export naming. Env prefix PBB_."""
from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_START_YEAR = 2014
DEFAULT_END_YEAR = 2025


class RecordSettings(BaseSettings):
    """Inclusive year range tracked per record; years outside it are ignored everywhere."""

    model_config = SettingsConfigDict(
        env_prefix="PBB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start_year: int = Field(default=DEFAULT_START_YEAR, ge=1900, le=2200, description="START_YEAR (inclusive)")
    end_year: int = Field(default=DEFAULT_END_YEAR, ge=1900, le=2200, description="END_YEAR (inclusive)")
    export_filename_prefix: str = Field(default="Rekap_Piutang_Kampar", description="CSV filename prefix")

    @model_validator(mode="after")
    def validate_year_range(self) -> "RecordSettings":
        if self.start_year > self.end_year:
            raise ValueError(f"start_year ({self.start_year}) must be <= end_year ({self.end_year})")
        return self

    @property
    def years(self) -> list[int]:
        return list(range(self.start_year, self.end_year + 1))
