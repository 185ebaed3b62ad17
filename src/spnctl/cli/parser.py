"""Argument parser construction for the spnctl CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from spnctl.config.settings import KEYRING_BACKENDS


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="spnctl",
        description="spnctl - inspect chain launches on Starport Network",
    )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Working directory to run from (default: current directory)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Show details of a chain",
        description="Show details of a chain launch registered on the network",
    )
    # Validated by the command itself so that it can print usage on error
    show_parser.add_argument(
        "kind",
        metavar="{info,genesis,accounts,peers}",
        help="What to show",
    )
    show_parser.add_argument(
        "launch_id",
        metavar="launch-id",
        help="Launch ID of the chain",
    )
    show_parser.add_argument(
        "--keyring-backend",
        choices=KEYRING_BACKENDS,
        help="Keyring backend to store your account keys (default: from settings)",
    )
    show_parser.add_argument(
        "--from",
        dest="account",
        default="default",
        help="Account name to use for sending transactions to SPN",
    )
    show_parser.add_argument(
        "--home",
        type=Path,
        help="Home directory used for the chain (default: ~/spn/<launch-id>)",
    )
    show_parser.add_argument(
        "--api-address",
        help="SPN API address (default: from settings or SPNCTL_API_ADDRESS)",
    )
    show_parser.set_defaults(usage=show_parser.format_usage())

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))
