from __future__ import annotations

from pathlib import Path

import pytest

from spnctl.cli.parser import parse_args


def test_parse_args_without_command() -> None:
    args = parse_args([])
    assert args.command is None
    assert args.workdir is None


def test_parse_args_show_defaults() -> None:
    args = parse_args(["show", "info", "42"])
    assert args.command == "show"
    assert args.kind == "info"
    assert args.launch_id == "42"
    assert args.keyring_backend is None
    assert args.account == "default"
    assert args.home is None
    assert args.api_address is None
    assert args.usage.startswith("usage: spnctl show")


def test_parse_args_show_passthrough_flags() -> None:
    args = parse_args(
        [
            "show",
            "peers",
            "3",
            "--keyring-backend",
            "os",
            "--from",
            "alice",
            "--home",
            "/tmp/mars",
            "--api-address",
            "http://localhost:1317",
        ]
    )
    assert args.keyring_backend == "os"
    assert args.account == "alice"
    assert args.home == Path("/tmp/mars")
    assert args.api_address == "http://localhost:1317"


def test_parse_args_show_leaves_kind_validation_to_command() -> None:
    args = parse_args(["show", "bogus", "1"])
    assert args.kind == "bogus"


def test_parse_args_show_requires_two_arguments() -> None:
    with pytest.raises(SystemExit):
        _ = parse_args(["show", "info"])


def test_parse_args_show_rejects_unknown_keyring() -> None:
    with pytest.raises(SystemExit):
        _ = parse_args(["show", "info", "1", "--keyring-backend", "vault"])
