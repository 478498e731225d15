"""
Configuration settings for recordkeeper.

Uses Pydantic Settings to load environment variables for file locations,
logging, and the seed values used by the demos.
"""
from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    # Files
    data_dir: Path = Field(Path("."), alias="DATA_DIR")
    inventory_file: str = Field("inventory.json", alias="INVENTORY_FILE")
    students_file: str = Field("students.txt", alias="STUDENTS_FILE")
    report_file: str = Field("report.txt", alias="REPORT_FILE")

    # Demo defaults
    default_patient_id: int = Field(1, alias="DEFAULT_PATIENT_ID")
    account_number: str = Field("SA-1001", alias="ACCOUNT_NUMBER")
    opening_balance: Decimal = Field(Decimal("1000"), alias="OPENING_BALANCE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def resolve(self, name: str | Path) -> Path:
        """Place a relative file name under `data_dir`; absolute paths pass through."""
        path = Path(name)
        if path.is_absolute():
            return path
        return self.data_dir / path


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
