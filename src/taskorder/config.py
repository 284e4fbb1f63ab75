# src/taskorder/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk at import time except the optional .env / config_local.py.
- Components take settings explicitly; get_settings() is only used by the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKORDER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    execution_log_path: Path

    # ---- Startup / shutdown ----
    autoload: bool
    autosave: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskorder") or "taskorder"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskorder"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        execution_log_path = _env_path(_k("EXECUTION_LOG_PATH"), data_dir / "tasks_log.txt")

        autoload = _env_bool(_k("AUTOLOAD"), True)
        autosave = _env_bool(_k("AUTOSAVE"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            execution_log_path=execution_log_path,
            autoload=autoload,
            autosave=autosave,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    # Simple overrides for selected names. Keep it explicit.
    if hasattr(_config_local, "AUTOLOAD"):
        object.__setattr__(SETTINGS, "autoload", bool(_config_local.AUTOLOAD))  # type: ignore[misc]
    if hasattr(_config_local, "AUTOSAVE"):
        object.__setattr__(SETTINGS, "autosave", bool(_config_local.AUTOSAVE))  # type: ignore[misc]


def get_settings() -> Settings:
    return SETTINGS
