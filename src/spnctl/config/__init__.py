"""Configuration management for spnctl."""
from __future__ import annotations

from spnctl.config.paths import SpnctlPaths, get_paths, reset_paths
from spnctl.config.settings import Settings, get_settings_path, settings

__all__ = [
    "Settings",
    "SpnctlPaths",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
