"""Read-only records returned by the network client."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from spnctl.errors import InvalidArgumentError

_LAUNCH_ID_RE = re.compile(r"[0-9]+")
MAX_LAUNCH_ID = 2**64 - 1


def parse_launch_id(value: str) -> int:
    """Parse a launch identifier from a CLI argument.

    Only plain ASCII decimal digits are accepted, so signs, whitespace and
    underscores are rejected rather than silently normalized by ``int``.
    """
    if not _LAUNCH_ID_RE.fullmatch(value):
        raise InvalidArgumentError(
            f"invalid launch ID {value!r}: must be a positive integer"
        )
    launch_id = int(value)
    if launch_id == 0:
        raise InvalidArgumentError("launch ID must be greater than 0")
    if launch_id > MAX_LAUNCH_ID:
        raise InvalidArgumentError(f"launch ID {value} is out of range")
    return launch_id


def format_coins(coins: Any) -> str:
    """Render a coin list as ``<amount><denom>`` joined by commas.

    Strings are passed through unchanged; the order of a list is kept.
    """
    if coins is None:
        return ""
    if isinstance(coins, str):
        return coins
    return ",".join(
        f"{coin.get('amount', '')}{coin.get('denom', '')}" for coin in coins
    )


def format_peer(peer: Any) -> str:
    """Render a validator peer as a ``node-id@host:port`` string."""
    if peer is None:
        return ""
    if isinstance(peer, str):
        return peer
    peer_id = peer.get("id", "")
    address = peer.get("tcpAddress") or peer.get("tcp_address") or ""
    if peer_id and address:
        return f"{peer_id}@{address}"
    return peer_id or address


@dataclass(frozen=True)
class ChainLaunch:
    """A chain launch registered on the network."""

    launch_id: int
    genesis_chain_id: str
    source_url: str
    source_hash: str
    coordinator_id: int = 0
    launch_triggered: bool = False
    has_custom_genesis: bool = False
    initial_genesis_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChainLaunch:
        """Create from a ``chain`` object of the launch query response."""
        initial_genesis = data.get("initialGenesis") or {}
        genesis_url = initial_genesis.get("genesisURL") or {}
        return cls(
            launch_id=int(data.get("launchID", 0)),
            genesis_chain_id=str(data.get("genesisChainID", "")),
            source_url=str(data.get("sourceURL", "")),
            source_hash=str(data.get("sourceHash", "")),
            coordinator_id=int(data.get("coordinatorID", 0)),
            launch_triggered=bool(data.get("launchTriggered", False)),
            has_custom_genesis=bool(genesis_url),
            initial_genesis_url=str(genesis_url.get("url", "")),
        )


@dataclass(frozen=True)
class GenesisAccount:
    """An account funded in the genesis of a launch."""

    address: str
    coins: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenesisAccount:
        return cls(
            address=str(data.get("address", "")),
            coins=format_coins(data.get("coins")),
        )


@dataclass(frozen=True)
class GenesisValidator:
    """A validator in the genesis of a launch."""

    address: str
    peer: str
    self_delegation: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenesisValidator:
        delegation = data.get("selfDelegation")
        return cls(
            address=str(data.get("address", "")),
            peer=format_peer(data.get("peer")),
            self_delegation=format_coins([delegation] if delegation else None),
        )


@dataclass(frozen=True)
class GenesisInformation:
    """Snapshot of the genesis accounts and validators of a launch."""

    genesis_accounts: tuple[GenesisAccount, ...] = field(default_factory=tuple)
    genesis_validators: tuple[GenesisValidator, ...] = field(default_factory=tuple)
