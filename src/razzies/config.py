"""Environment-driven settings.

Loaded from RAZZIES_* environment variables or a .env file, all optional:

- RAZZIES_DB_PATH          SQLite file (default data/razzies.db)
- RAZZIES_CSV_PATH         movie list CSV used for seeding (default data/movielist.csv)
- RAZZIES_SEED_ON_STARTUP  reload the CSV when the app starts (default true)
- RAZZIES_DEDUPE_CREDITS   drop repeated names within one credit (default false)
- RAZZIES_LOG_LEVEL        logging level name (default INFO)
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_PATH = Path("data/razzies.db")
DEFAULT_CSV_PATH = Path("data/movielist.csv")

ENV_PREFIX = "RAZZIES_"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    db_path: Path = DEFAULT_DB_PATH
    csv_path: Path = DEFAULT_CSV_PATH
    seed_on_startup: bool = True
    dedupe_credits: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: RAZZIES_* variables to use instead of os.environ and .env.

    Returns:
        Settings with defaults for anything unset.

    Raises:
        pydantic.ValidationError: If a value cannot be parsed, e.g. a
            boolean flag set to "ture".
    """
    if env is None:
        return Settings()

    overrides = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX) and value != ""
    }
    return Settings(**overrides)
