# src/tiny_todo/config.py

"""Settings loaded from environment variables (+ optional .env).

Every value has a default, so the tracker runs with no environment at all.
Variables only override the defaults (data location, strict loading, logging).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

# src/tiny_todo/config.py -> project root (only meaningful in a source checkout)
APP_DIR = Path(__file__).resolve().parent.parent.parent
USER_DATA_DIR = Path("~/.local/share/tiny-todo").expanduser()
DEFAULT_DATA_FILE_NAME = "tasks.txt"


def default_data_dir(app_dir: Path = APP_DIR) -> Path:
    """
    <app_dir>/.data when running from a checkout (pyproject.toml next to src/),
    otherwise a per-user directory; a wheel install would put app_dir in site-packages.
    """
    if (app_dir / "pyproject.toml").is_file() and (app_dir / "src").is_dir():
        return app_dir / ".data"
    return USER_DATA_DIR


DEFAULT_DATA_DIR = default_data_dir()

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    data_dir: Path
    data_file: Path
    strict_load: bool

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR) or DEFAULT_DATA_DIR
        data_file = _env_path(_k("DATA_FILE"), data_dir / DEFAULT_DATA_FILE_NAME) or (
            data_dir / DEFAULT_DATA_FILE_NAME
        )
        strict_load = _env_bool(_k("STRICT_LOAD"), False)

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"), None)

        return Settings(
            data_dir=data_dir,
            data_file=data_file,
            strict_load=strict_load,
            log_level=log_level,
            log_file=log_file,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
