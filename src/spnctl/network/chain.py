"""Chain handle bound to the source declared by a launch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spnctl.config.paths import get_paths
from spnctl.errors import ResolutionError
from spnctl.network.types import ChainLaunch


@dataclass(frozen=True)
class ChainSource:
    """Where a chain's code comes from."""

    url: str
    hash: str
    launch_id: int
    chain_id: str = ""


def source_launch(launch: ChainLaunch, launch_id: int) -> ChainSource:
    """Build a chain source from a launch descriptor.

    The source is keyed by the requested ``launch_id``; the ID echoed in the
    descriptor is not trusted for local paths.
    """
    return ChainSource(
        url=launch.source_url,
        hash=launch.source_hash,
        launch_id=launch_id,
        chain_id=launch.genesis_chain_id,
    )


def chain_name_from_url(url: str) -> str:
    """Derive a chain display name from its repository URL.

    ``https://github.com/org/mars.git`` -> ``mars``
    """
    name = url.rstrip("/").rsplit("/", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


class NetworkChain:
    """Local view of a chain launched through the network."""

    def __init__(
        self,
        source: ChainSource,
        *,
        home: Path | None = None,
        spn_home: Path | None = None,
    ) -> None:
        if not source.url:
            raise ResolutionError(
                f"launch {source.launch_id} does not declare a source URL"
            )
        self._source = source
        self._home = home
        self._spn_home = spn_home

    def name(self) -> str:
        """Display name of the chain."""
        return chain_name_from_url(self._source.url)

    def source_url(self) -> str:
        return self._source.url

    def source_hash(self) -> str:
        return self._source.hash

    def id(self) -> str:
        """Chain ID declared for the genesis of the launch."""
        if not self._source.chain_id:
            raise ResolutionError(
                f"launch {self._source.launch_id} has no genesis chain ID"
            )
        return self._source.chain_id

    def home(self) -> Path:
        """Home directory of the local chain node.

        An explicit home wins; otherwise homes live under the spn home as
        ``<spn_home>/<launch_id>``.
        """
        if self._home is not None:
            return self._home.expanduser()
        try:
            if self._spn_home is not None:
                return self._spn_home / str(self._source.launch_id)
            return get_paths().chain_home(self._source.launch_id)
        except RuntimeError as e:
            # Path.home() raises when no home directory can be determined
            raise ResolutionError(f"cannot resolve chain home: {e}") from e

    def genesis_path(self) -> Path:
        """Path of the genesis file inside the chain home."""
        return self.home() / "config" / "genesis.json"
