"""Runtime configuration, read from environment variables.

KIOSK_DATABASE_URL  SQLAlchemy URL (default: SQLite file under ./data)
KIOSK_LOG_LEVEL     root log level name (default: INFO)
KIOSK_SQL_ECHO      "1"/"true" to log every SQL statement
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    sql_echo: bool = False

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            database_url=env.get("KIOSK_DATABASE_URL", f"sqlite:///{_DATA_DIR / 'kiosk.db'}"),
            log_level=env.get("KIOSK_LOG_LEVEL", "INFO").upper(),
            sql_echo=env.get("KIOSK_SQL_ECHO", "").strip().lower() in _TRUTHY,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
