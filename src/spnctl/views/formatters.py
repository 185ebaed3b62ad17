"""Formatters for the ``show`` views of a chain launch.

Each formatter reads from its collaborators and returns the exact text to
print. Formatters never write to stdout themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import yaml

from spnctl.errors import NotInitializedError
from spnctl.network.types import GenesisInformation
from spnctl.views.entrywriter import write_entries

logger = logging.getLogger(__name__)

ACCOUNTS_HEADER: tuple[str, ...] = ("Genesis Account", "Coins")
PEERS_LABEL = "Persistent Peers"


class ChainLike(Protocol):
    """Chain accessors needed by the info and genesis views."""

    def id(self) -> str: ...

    def name(self) -> str: ...

    def source_url(self) -> str: ...

    def source_hash(self) -> str: ...

    def home(self) -> Path: ...

    def genesis_path(self) -> Path: ...


class GenesisSourceLike(Protocol):
    """Network query needed by the accounts and peers views."""

    def genesis_information(self, launch_id: int) -> GenesisInformation: ...


def format_chain_info(chain: ChainLike, launch_id: int) -> str:
    """Render launch metadata as a YAML document with a fixed key order."""
    home = chain.home()
    chain_id = chain.id()
    info = {
        "LaunchID": launch_id,
        "ChainID": chain_id,
        "Name": chain.name(),
        "SourceURL": chain.source_url(),
        "Hash": chain.source_hash(),
        "HomePath": str(home),
    }
    return yaml.safe_dump(
        info, sort_keys=False, default_flow_style=False, allow_unicode=True
    )


def format_chain_genesis(chain: ChainLike) -> str:
    """Return the stored genesis file exactly as it is on disk."""
    genesis_path = chain.genesis_path()
    if not genesis_path.exists():
        raise NotInitializedError(
            f"chain genesis not initialized: {genesis_path}", path=genesis_path
        )
    logger.info("Reading genesis from %s", genesis_path)
    # newline="" keeps line endings untouched
    with open(
        genesis_path, encoding="utf-8", errors="surrogateescape", newline=""
    ) as handle:
        return handle.read()


def format_chain_accounts(network: GenesisSourceLike, launch_id: int) -> str:
    """Render genesis accounts as a two-column table."""
    genesis = network.genesis_information(launch_id)
    entries = [
        (account.address, account.coins) for account in genesis.genesis_accounts
    ]
    return write_entries(ACCOUNTS_HEADER, *entries)


def format_chain_peers(network: GenesisSourceLike, launch_id: int) -> str:
    """Render validator peers as a single comma-separated line."""
    genesis = network.genesis_information(launch_id)
    peers = [validator.peer for validator in genesis.genesis_validators]
    return f"{PEERS_LABEL}: {','.join(peers)}\n"
