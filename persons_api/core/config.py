"""
Configuration helpers for the Persons API.

Routers, services and scripts read a Settings instance from get_settings()
instead of fetching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_CSV_PATH = Path(__file__).resolve().parents[2] / "data" / "sample-input.csv"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    csv_path: str
    seed_on_startup: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///persons.db").strip(),
        csv_path=os.getenv("CSV_PATH") or str(DEFAULT_CSV_PATH),
        seed_on_startup=_bool(os.getenv("SEED_ON_STARTUP"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
