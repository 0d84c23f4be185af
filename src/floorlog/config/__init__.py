"""Configuration helpers for the floor log scraper."""
from __future__ import annotations

from .settings import (
    AppConfig,
    RunConfig,
    SourceConfig,
    StorageConfig,
    load_config,
    resolve_config_path,
    save_config,
)

__all__ = [
    "AppConfig",
    "RunConfig",
    "SourceConfig",
    "StorageConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
