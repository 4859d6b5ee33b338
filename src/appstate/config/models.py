"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, appstate.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["debug", "info", "warn", "error"]


class AppConfig(BaseModel):
    """[app] section."""

    model_config = {"frozen": True}

    version: str = "1.0.0"
    title: str = "appstate"
    mode: Literal["development", "production", "test"] = "development"
    log_level: LogLevel = "warn"


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    backend: Literal["sqlite", "memory"] = "sqlite"
    path: Path | None = None  # defaults to {root}/.appstate/state.db
