from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path

import pytest

from spnctl.config.paths import reset_paths
from spnctl.config.settings import API_ADDRESS_ENV, settings


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Prevent tests from persisting settings to disk."""
    original_data = copy.deepcopy(settings._data)

    def _noop_save() -> None:
        return None

    monkeypatch.setattr(settings, "_save", _noop_save)
    monkeypatch.delenv(API_ADDRESS_ENV, raising=False)
    settings._data = {}
    try:
        yield
    finally:
        settings._data = original_data


@pytest.fixture(autouse=True)
def isolate_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point XDG directories at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    reset_paths()
    try:
        yield
    finally:
        reset_paths()
