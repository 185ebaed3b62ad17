"""Shared context helpers for CLI command modules."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path
from types import TracebackType

from rich.console import Console
from rich.status import Status

from spnctl.config.settings import settings
from spnctl.network.chain import ChainSource, NetworkChain
from spnctl.network.client import NetworkClient

logger = logging.getLogger(__name__)

NetworkFactory = Callable[..., NetworkClient]


class NetworkBuilder:
    """Owns the spinner, network client and chains of one command.

    Use as a context manager: everything acquired inside the ``with`` block
    is released when it exits, whether the command succeeded or not.
    """

    def __init__(
        self,
        *,
        api_address: str,
        timeout: float,
        keyring_backend: str | None = None,
        account: str | None = None,
        home: Path | None = None,
        spn_home: Path | None = None,
        console: Console | None = None,
        network_factory: NetworkFactory = NetworkClient,
    ) -> None:
        self.api_address = api_address
        self.timeout = timeout
        self.keyring_backend = keyring_backend
        self.account = account
        self.home = home
        self.spn_home = spn_home
        self._console = console or Console(stderr=True)
        self._network_factory = network_factory
        self._network: NetworkClient | None = None
        self._status: Status | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> NetworkBuilder:
        """Build from parsed CLI flags, falling back to settings."""
        return cls(
            api_address=getattr(args, "api_address", None) or settings.api_address,
            timeout=settings.request_timeout,
            keyring_backend=(
                getattr(args, "keyring_backend", None) or settings.keyring_backend
            ),
            account=getattr(args, "account", None),
            home=getattr(args, "home", None),
            spn_home=settings.spn_home,
        )

    def __enter__(self) -> NetworkBuilder:
        if self._console.is_terminal:
            self._status = self._console.status("Fetching launch details...")
            self._status.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    def stop_spinner(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def network(self) -> NetworkClient:
        """Return the network client, creating it on first use."""
        if self._network is None:
            logger.info("Connecting to SPN API at %s", self.api_address)
            self._network = self._network_factory(
                self.api_address,
                timeout=self.timeout,
                keyring_backend=self.keyring_backend,
                account=self.account,
            )
        return self._network

    def chain(self, source: ChainSource) -> NetworkChain:
        """Resolve a chain handle for ``source``."""
        return NetworkChain(source, home=self.home, spn_home=self.spn_home)

    def cleanup(self) -> None:
        """Stop the spinner and close the network client."""
        self.stop_spinner()
        if self._network is not None:
            self._network.close()
            self._network = None
