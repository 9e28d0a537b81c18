"""Upload orchestrator configuration. Env prefix: ORCH_."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OrchestratorSettings(BaseSettings):
    """Settings for sequential batch processing."""

    model_config = SettingsConfigDict(
        env_prefix="ORCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    inter_file_delay_s: float = Field(default=1.5, ge=0, description="Pause before each file after the first")
    commit_partial_on_failure: bool = Field(
        default=False,
        description="Keep records extracted before a failing file (default: discard the whole batch)",
    )
    allowed_mime_prefixes: list[str] = Field(
        default=["application/pdf", "image/"],
        description="Accepted media types (prefix match)",
    )
