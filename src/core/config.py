"""Application configuration.

Environment variables (prefix `FNR_`) and `.env` files are read through
pydantic-settings, so the CLI and services share one typed settings object.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "fnr"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "fnr"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "fnr"
    return Path.home() / ".config" / "fnr"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central settings for the CLI and services."""

    model_config = SettingsConfigDict(
        env_prefix="FNR_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user's global one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level.",
    )
    json_output: bool = Field(
        default=False,
        description="Print `validate` results as JSON instead of a table.",
    )
    export_dir: Path = Field(
        default=Path("reports"),
        description="Base directory for relative `--export` paths.",
    )
    count_progress_every: int = Field(
        default=10_000_000,
        ge=1,
        description="Log counting progress every N leading sequences.",
    )

    def resolve_export_path(self, path: Path) -> Path:
        """Place relative export paths under `export_dir`."""

        if path.is_absolute():
            return path
        return self.export_dir / path
