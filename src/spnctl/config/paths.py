"""Centralized path management for spnctl.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/spnctl (default: ~/.config/spnctl)
- State: $XDG_STATE_HOME/spnctl (default: ~/.local/state/spnctl)

Chain homes live outside the XDG tree, under ~/spn/<launch-id>, so that
they match the layout used by the other network tooling.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


def _default_spn_home() -> Path:
    return Path.home() / "spn"


@dataclass
class SpnctlPaths:
    """Centralized path management following XDG spec."""

    _config_home: Path = field(default_factory=_xdg_config_home)
    _state_home: Path = field(default_factory=_xdg_state_home)
    _spn_home: Path = field(default_factory=_default_spn_home)

    # === GLOBAL PATHS (XDG compliant) ===

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/spnctl/"""
        return self._config_home / "spnctl"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/spnctl/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/spnctl/"""
        return self._state_home / "spnctl"

    @property
    def debug_log(self) -> Path:
        """Debug log: ~/.local/state/spnctl/debug.log"""
        return self.global_state_dir / "debug.log"

    # === CHAIN PATHS ===

    @property
    def spn_home(self) -> Path:
        """Root directory holding one home per launched chain."""
        return self._spn_home

    def chain_home(self, launch_id: int) -> Path:
        """Get the default home directory for a chain launch."""
        return self.spn_home / str(launch_id)


# Singleton instance
_paths: SpnctlPaths | None = None


def get_paths() -> SpnctlPaths:
    """Get the paths singleton.

    Paths are computed from the environment on first call and reused
    afterwards.
    """
    global _paths
    if _paths is None:
        _paths = SpnctlPaths()
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
