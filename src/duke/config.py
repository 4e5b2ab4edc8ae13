# src/duke/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Injectable: bootstrap accepts any object with the same attributes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DUKE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Persistence ----
    save_on_mutation: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "duke").strip() or "duke"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        save_on_mutation = _env_bool(_k("SAVE_ON_MUTATION"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/duke"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            save_on_mutation=save_on_mutation,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once per process (reads .env on first call)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
