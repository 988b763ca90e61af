"""Mini README: Centralised configuration models and helpers for Pocket Ledger.

Structure:
    * PocketLedgerSettings - Pydantic settings describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to discover where ledger files live, the opening
    balance given to fresh accounts, and the logging level. Values can be
    overridden with ``POCKETLEDGER_*`` environment variables or a ``.env``
    file. The configuration is cached so validation runs once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the Pocket Ledger application."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_directory: Path = Field(
        Path("data"),
        validate_default=True,
        description="Directory where per-user ledger files are written.",
    )
    opening_balance: float = Field(
        2000.0,
        ge=0,
        description="Balance every account starts from before stored records are replayed.",
    )
    default_username: str = Field(
        "default",
        min_length=1,
        description="Account name used when the operator does not provide one.",
    )
    data_file_suffix: str = Field(
        "_finance_data.txt",
        description="Suffix appended to the username to form the ledger file name.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line interface.",
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value if value is not None else "data").expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def data_file_for(self, username: str) -> Path:
        """Return the ledger file path owned by ``username``."""

        return self.data_directory / f"{username}{self.data_file_suffix}"


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()
