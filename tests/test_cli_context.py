from __future__ import annotations

import argparse
import io
from pathlib import Path

from fakes import FakeNetwork
from rich.console import Console

from spnctl.cli.context import NetworkBuilder
from spnctl.config.settings import API_ADDRESS_ENV, DEFAULT_API_ADDRESS, settings
from spnctl.network.chain import ChainSource


def test_from_args_falls_back_to_settings(tmp_path: Path) -> None:
    settings._data = {"keyring_backend": "os", "spn_home": str(tmp_path)}
    args = argparse.Namespace(api_address=None, keyring_backend=None, account="bob")

    builder = NetworkBuilder.from_args(args)

    assert builder.api_address == DEFAULT_API_ADDRESS
    assert builder.keyring_backend == "os"
    assert builder.account == "bob"
    assert builder.home is None
    assert builder.spn_home == tmp_path.resolve()


def test_from_args_flags_win(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv(API_ADDRESS_ENV, "http://env:1317")
    args = argparse.Namespace(
        api_address="http://flag:1317",
        keyring_backend="file",
        account="alice",
        home=Path("/tmp/h"),
    )

    builder = NetworkBuilder.from_args(args)

    assert builder.api_address == "http://flag:1317"
    assert builder.keyring_backend == "file"
    assert builder.home == Path("/tmp/h")


def test_network_is_created_once_and_closed_on_exit() -> None:
    network = FakeNetwork()
    created: list[dict[str, object]] = []

    def factory(address: str, **kwargs: object) -> FakeNetwork:
        created.append({"address": address, **kwargs})
        return network

    builder = NetworkBuilder(
        api_address="http://spn.test",
        timeout=2.5,
        keyring_backend="test",
        account="alice",
        console=Console(file=io.StringIO()),
        network_factory=factory,  # type: ignore[arg-type]
    )

    with builder:
        assert builder.network() is builder.network()

    assert created == [
        {
            "address": "http://spn.test",
            "timeout": 2.5,
            "keyring_backend": "test",
            "account": "alice",
        }
    ]
    assert network.closed is True


def test_spinner_runs_on_terminal_and_stops_on_exit() -> None:
    console = Console(file=io.StringIO(), force_terminal=True)
    builder = NetworkBuilder(
        api_address="http://spn.test", timeout=1.0, console=console
    )

    with builder:
        assert builder._status is not None

    assert builder._status is None


def test_no_spinner_without_terminal() -> None:
    builder = NetworkBuilder(
        api_address="http://spn.test",
        timeout=1.0,
        console=Console(file=io.StringIO()),
    )

    with builder:
        assert builder._status is None


def test_chain_uses_builder_home(tmp_path: Path) -> None:
    builder = NetworkBuilder(
        api_address="http://spn.test",
        timeout=1.0,
        home=tmp_path,
        console=Console(file=io.StringIO()),
    )

    chain = builder.chain(ChainSource(url="https://x/mars", hash="h", launch_id=1))

    assert chain.home() == tmp_path
