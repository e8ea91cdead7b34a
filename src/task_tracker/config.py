# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process.
- Every value has a sane default, so a bare `task-tracker list` just works.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASK_TRACKER"

DEFAULT_DB_PATH = Path("database") / "task.json"
DEFAULT_LOG_DIR = Path(".local/task-tracker")

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv
    except ImportError:
        return
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    value = _env_tristate(name)
    return default if value is None else value


def _env_tristate(name: str) -> bool | None:
    """True/False when the variable is set to a recognizable flag, else None (auto)."""
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    db_path: Path

    # ---- Logging ----
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Presentation ----
    color: bool | None  # None -> decide from the terminal

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        return Settings(
            db_path=_env_path(_k("DB_PATH"), DEFAULT_DB_PATH),
            log_level=log_level,
            log_dir=_env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            color=_env_tristate(_k("COLOR")),
        )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv_if_available()
    return Settings.from_env()
