"""Configuration and settings persistence."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from spnctl.config.paths import get_paths

logger = logging.getLogger(__name__)

DEFAULT_API_ADDRESS = "http://0.0.0.0:1317"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_KEYRING_BACKEND = "test"

KEYRING_BACKENDS = ("test", "os", "file", "memory", "kwallet", "pass")

API_ADDRESS_ENV = "SPNCTL_API_ADDRESS"


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


class Settings:
    """Persistent settings for spnctl."""

    _defaults: dict[str, Any] = {
        "api_address": DEFAULT_API_ADDRESS,
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,
        "keyring_backend": DEFAULT_KEYRING_BACKEND,
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                self._data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                logger.warning("Ignoring unreadable settings file %s", path)
                self._data = {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    @property
    def api_address(self) -> str:
        """Get the SPN API address.

        The SPNCTL_API_ADDRESS environment variable wins over the
        settings file.
        """
        from_env = os.environ.get(API_ADDRESS_ENV)
        if from_env:
            return from_env.rstrip("/")
        return str(self.get("api_address")).rstrip("/")

    @api_address.setter
    def api_address(self, value: str) -> None:
        """Set the SPN API address."""
        self.set("api_address", value)

    @property
    def request_timeout(self) -> float:
        """Get the HTTP request timeout in seconds.

        Invalid or non-positive values fall back to the default.
        """
        raw_value = self._data.get("request_timeout")
        if raw_value in (None, ""):
            return DEFAULT_REQUEST_TIMEOUT
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            return DEFAULT_REQUEST_TIMEOUT
        if value <= 0:
            return DEFAULT_REQUEST_TIMEOUT
        return value

    @request_timeout.setter
    def request_timeout(self, value: float) -> None:
        """Set the HTTP request timeout."""
        self.set("request_timeout", value)

    @property
    def keyring_backend(self) -> str:
        """Get the default keyring backend name."""
        value = str(self.get("keyring_backend"))
        if value not in KEYRING_BACKENDS:
            return DEFAULT_KEYRING_BACKEND
        return value

    @keyring_backend.setter
    def keyring_backend(self, value: str) -> None:
        """Set the default keyring backend."""
        self.set("keyring_backend", value)

    @property
    def spn_home(self) -> Path:
        """Get the root directory for chain homes.

        Returns the configured directory, or defaults to the
        centralized paths spn home.
        """
        saved = self._data.get("spn_home")
        if saved:
            return Path(saved).expanduser().resolve()
        return get_paths().spn_home

    @spn_home.setter
    def spn_home(self, value: str | Path) -> None:
        """Set the root directory for chain homes."""
        self.set("spn_home", str(value))


# Global settings instance
settings = Settings()
