#!/usr/bin/env python
"""
Runtime settings snapshot for the TrackHub launcher.

Merges defaults from config.Config with optional overrides and validates
them into a single typed object.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from config import Config


class AppSettings(BaseModel):
    """Values the server process needs before the Flask app exists."""

    model_config = ConfigDict(extra="ignore")

    database_url: str
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    enable_console_logs: bool = False
    log_dir: str

    @field_validator("port", mode="before")
    @classmethod
    def _coerce_port(cls, value: object) -> int:
        try:
            port = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 3000
        if port <= 0 or port > 65535:
            return 3000
        return port

    @field_validator("debug", "enable_console_logs", mode="before")
    @classmethod
    def _coerce_flag(cls, value: object) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
        return bool(value)


def load_app_settings(overrides: Optional[Dict[str, Any]] = None) -> AppSettings:
    """Load settings merging config defaults with optional runtime overrides."""
    data: Dict[str, Any] = {
        "database_url": Config.SQLALCHEMY_DATABASE_URI,
        "host": Config.HOST,
        "port": Config.PORT,
        "debug": Config.DEBUG,
        "enable_console_logs": Config.ENABLE_CONSOLE_LOGS,
        "log_dir": Config.LOG_DIR,
    }
    if overrides:
        data.update(overrides)
    return AppSettings.model_validate(data)


__all__ = [
    "AppSettings",
    "load_app_settings",
]
