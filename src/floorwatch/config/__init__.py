"""Configuration helpers for the floorwatch pipeline."""
from __future__ import annotations

from .settings import (
    AppConfig,
    GovInfoConfig,
    ParserConfig,
    load_config,
    resolve_config_path,
    save_config,
)

__all__ = [
    "AppConfig",
    "GovInfoConfig",
    "ParserConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
