"""REST client for the Starport Network launch module.

Only read queries are implemented. Every transport or decoding failure is
raised as ``NetworkError``; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import requests

from spnctl.errors import NetworkError
from spnctl.network.types import (
    ChainLaunch,
    GenesisAccount,
    GenesisInformation,
    GenesisValidator,
)

logger = logging.getLogger(__name__)

LAUNCH_PATH = "/tendermint/spn/launch"


class NetworkClient:
    """Query chain launches and their genesis information."""

    def __init__(
        self,
        api_address: str,
        *,
        timeout: float,
        keyring_backend: str | None = None,
        account: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.api_address = api_address.rstrip("/")
        self.timeout = timeout
        # Carried for commands that sign; read queries never use them.
        self.keyring_backend = keyring_backend
        self.account = account
        self._session = session or requests.Session()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def chain_launch(self, launch_id: int) -> ChainLaunch:
        """Fetch the chain launch registered under ``launch_id``."""
        payload = self._get(f"{LAUNCH_PATH}/chain/{launch_id}", launch_id=launch_id)
        chain = payload.get("chain")
        if not isinstance(chain, dict):
            raise NetworkError(f"malformed response for launch {launch_id}")
        try:
            return ChainLaunch.from_dict(chain)
        except (TypeError, ValueError, AttributeError) as e:
            raise NetworkError(f"malformed response for launch {launch_id}") from e

    def genesis_information(self, launch_id: int) -> GenesisInformation:
        """Fetch genesis accounts and validators of a launch."""
        try:
            accounts = tuple(
                GenesisAccount.from_dict(item)
                for item in self._get_paginated(
                    f"{LAUNCH_PATH}/genesis_account/{launch_id}",
                    "genesisAccount",
                    launch_id=launch_id,
                )
            )
            validators = tuple(
                GenesisValidator.from_dict(item)
                for item in self._get_paginated(
                    f"{LAUNCH_PATH}/genesis_validator/{launch_id}",
                    "genesisValidator",
                    launch_id=launch_id,
                )
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise NetworkError(
                f"malformed genesis information for launch {launch_id}"
            ) from e
        logger.info(
            "Launch %d genesis: %d accounts, %d validators",
            launch_id,
            len(accounts),
            len(validators),
        )
        return GenesisInformation(
            genesis_accounts=accounts,
            genesis_validators=validators,
        )

    def _get_paginated(
        self, path: str, key: str, *, launch_id: int
    ) -> Iterator[dict[str, Any]]:
        """Yield list items across pages until ``next_key`` is empty."""
        page_key: str | None = None
        seen_keys: set[str] = set()
        while True:
            params = {"pagination.key": page_key} if page_key else None
            payload = self._get(path, launch_id=launch_id, params=params)
            items = payload.get(key) or []
            if not isinstance(items, list):
                raise NetworkError(
                    f"malformed {key} response for launch {launch_id}"
                )
            yield from items
            pagination = payload.get("pagination") or {}
            if not isinstance(pagination, dict):
                raise NetworkError(
                    f"malformed {key} pagination for launch {launch_id}"
                )
            page_key = pagination.get("next_key")
            if not page_key:
                return
            if page_key in seen_keys:
                raise NetworkError(
                    f"{key} pagination for launch {launch_id} repeats key {page_key}"
                )
            seen_keys.add(page_key)

    def _get(
        self,
        path: str,
        *,
        launch_id: int,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.api_address}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise NetworkError(f"cannot reach {self.api_address}: {e}") from e

        if response.status_code == 404:
            raise NetworkError(f"launch {launch_id} not found", status_code=404)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error("Query %s returned %s", url, response.status_code)
            raise NetworkError(
                f"query for launch {launch_id} failed: {e}",
                status_code=response.status_code,
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise NetworkError(f"invalid JSON from {url}") from e
        if not isinstance(payload, dict):
            raise NetworkError(f"unexpected response from {url}")
        return payload
