from __future__ import annotations

from pathlib import Path

import pytest

from spnctl.config.paths import reset_paths
from spnctl.errors import ResolutionError
from spnctl.network.chain import (
    ChainSource,
    NetworkChain,
    chain_name_from_url,
    source_launch,
)
from spnctl.network.types import ChainLaunch


def _launch(**overrides: object) -> ChainLaunch:
    fields: dict[str, object] = {
        "launch_id": 12,
        "genesis_chain_id": "mars-1",
        "source_url": "https://github.com/org/mars.git",
        "source_hash": "deadbeef",
    }
    fields.update(overrides)
    return ChainLaunch(**fields)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("url", "name"),
    [
        ("https://github.com/org/mars.git", "mars"),
        ("https://github.com/org/mars/", "mars"),
        ("https://github.com/org/venus", "venus"),
    ],
)
def test_chain_name_from_url(url: str, name: str) -> None:
    assert chain_name_from_url(url) == name


def test_chain_from_launch_source(tmp_path: Path) -> None:
    chain = NetworkChain(source_launch(_launch(), 12), spn_home=tmp_path)

    assert chain.id() == "mars-1"
    assert chain.name() == "mars"
    assert chain.source_url() == "https://github.com/org/mars.git"
    assert chain.source_hash() == "deadbeef"
    assert chain.home() == tmp_path / "12"
    assert chain.genesis_path() == tmp_path / "12" / "config" / "genesis.json"


def test_chain_home_override_wins(tmp_path: Path) -> None:
    chain = NetworkChain(
        source_launch(_launch(), 12), home=tmp_path / "custom", spn_home=tmp_path
    )

    assert chain.home() == tmp_path / "custom"
    assert chain.genesis_path() == tmp_path / "custom" / "config" / "genesis.json"


def test_chain_home_defaults_to_spn_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/tester")
    reset_paths()
    chain = NetworkChain(source_launch(_launch(), 12))

    assert chain.home() == Path("/home/tester/spn/12")


def test_chain_id_missing_raises() -> None:
    chain = NetworkChain(source_launch(_launch(genesis_chain_id=""), 12))

    with pytest.raises(ResolutionError, match="no genesis chain ID"):
        chain.id()


def test_chain_requires_source_url() -> None:
    with pytest.raises(ResolutionError, match="does not declare a source URL"):
        NetworkChain(ChainSource(url="", hash="", launch_id=3))


def test_chain_home_follows_requested_launch(tmp_path: Path) -> None:
    # descriptor without a launchID decodes as 0
    chain = NetworkChain(source_launch(_launch(launch_id=0), 7), spn_home=tmp_path)

    assert chain.home() == tmp_path / "7"
    assert chain.genesis_path() == tmp_path / "7" / "config" / "genesis.json"
