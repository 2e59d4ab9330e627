"""Core configuration.

Environment variables are read through pydantic-settings so that adapters
(HTTP client, CLI) share one typed contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BACKEND_URL = "http://localhost:8080"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra deps)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rigbuilder"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rigbuilder"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rigbuilder"
    return Path.home() / ".config" / "rigbuilder"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# rigbuilder user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    `RIGBUILDER_BACKEND_URL` selects the backend host; without it the local
    development backend is assumed.
    """

    model_config = SettingsConfigDict(
        env_prefix="RIGBUILDER_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    backend_url: str = Field(
        default=DEFAULT_BACKEND_URL,
        min_length=1,
        description="Base URL of the desktop-builder backend.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds) handed to the transport.",
    )
    user_agent: str = Field(
        default="rigbuilder/0.1",
        min_length=1,
        description="User-Agent sent with every backend request.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
