"""Starport Network client and chain handles."""

from spnctl.network.chain import ChainSource, NetworkChain, source_launch
from spnctl.network.client import NetworkClient
from spnctl.network.types import (
    ChainLaunch,
    GenesisAccount,
    GenesisInformation,
    GenesisValidator,
    parse_launch_id,
)

__all__ = [
    "ChainLaunch",
    "ChainSource",
    "GenesisAccount",
    "GenesisInformation",
    "GenesisValidator",
    "NetworkChain",
    "NetworkClient",
    "parse_launch_id",
    "source_launch",
]
