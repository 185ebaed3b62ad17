"""Show command: display details of a chain launch."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable
from enum import Enum

from spnctl.cli.context import NetworkBuilder
from spnctl.errors import InvalidArgumentError, SpnctlError
from spnctl.network.chain import source_launch
from spnctl.network.types import parse_launch_id
from spnctl.views import (
    format_chain_accounts,
    format_chain_genesis,
    format_chain_info,
    format_chain_peers,
)

logger = logging.getLogger(__name__)


class ShowKind(Enum):
    """Views the show command can render."""

    INFO = "info"
    GENESIS = "genesis"
    ACCOUNTS = "accounts"
    PEERS = "peers"


class UnknownShowKindError(InvalidArgumentError):
    """The requested view is not one of ``ShowKind``."""


def parse_show_kind(value: str) -> ShowKind:
    """Parse a view name, rejecting anything outside ``ShowKind``."""
    try:
        return ShowKind(value)
    except ValueError:
        raise UnknownShowKindError(f"invalid arg {value}") from None


def _show_info(builder: NetworkBuilder, launch_id: int) -> str:
    launch = builder.network().chain_launch(launch_id)
    chain = builder.chain(source_launch(launch, launch_id))
    return format_chain_info(chain, launch_id)


def _show_genesis(builder: NetworkBuilder, launch_id: int) -> str:
    launch = builder.network().chain_launch(launch_id)
    chain = builder.chain(source_launch(launch, launch_id))
    return format_chain_genesis(chain)


def _show_accounts(builder: NetworkBuilder, launch_id: int) -> str:
    return format_chain_accounts(builder.network(), launch_id)


def _show_peers(builder: NetworkBuilder, launch_id: int) -> str:
    return format_chain_peers(builder.network(), launch_id)


_VIEWS: dict[ShowKind, Callable[[NetworkBuilder, int], str]] = {
    ShowKind.INFO: _show_info,
    ShowKind.GENESIS: _show_genesis,
    ShowKind.ACCOUNTS: _show_accounts,
    ShowKind.PEERS: _show_peers,
}

if set(_VIEWS) != set(ShowKind):
    raise RuntimeError("every ShowKind needs a view")


def show(kind_arg: str, launch_id_arg: str, builder: NetworkBuilder) -> str:
    """Render one view of a chain launch.

    Arguments are validated before ``builder`` is entered, so invalid input
    never touches the network or the filesystem. The builder is released
    before the rendered text is returned.
    """
    kind = parse_show_kind(kind_arg)
    launch_id = parse_launch_id(launch_id_arg)

    with builder:
        logger.info("Showing %s for launch %d", kind.value, launch_id)
        return _VIEWS[kind](builder, launch_id)


def _write_stdout(content: str) -> None:
    """Write text verbatim, keeping undecodable genesis bytes intact."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(content)
        return
    sys.stdout.flush()
    buffer.write(content.encode("utf-8", errors="surrogateescape"))
    buffer.flush()


def _discard_stdout() -> None:
    """Point stdout at devnull so the exit-time flush cannot fail again."""
    fileno = getattr(sys.stdout, "fileno", None)
    if fileno is None:
        return
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, fileno())
    except (OSError, ValueError):
        return


def cmd_show(args: argparse.Namespace) -> int:
    """Show details of a chain launch."""
    builder = NetworkBuilder.from_args(args)
    try:
        content = show(args.kind, args.launch_id, builder)
    except InvalidArgumentError as e:
        usage = getattr(args, "usage", None)
        if isinstance(e, UnknownShowKindError) and usage:
            print(usage, end="", file=sys.stderr)
        logger.error("Rejected arguments: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (SpnctlError, OSError) as e:
        logger.exception("Show %s %s failed", args.kind, args.launch_id)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        _write_stdout(content)
    except BrokenPipeError:
        logger.warning("Output closed before the %s view was written", args.kind)
        _discard_stdout()
        return 1
    return 0
