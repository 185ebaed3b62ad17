"""Error types raised by spnctl commands.

Every failure the ``show`` command can report maps to one of these
classes (or to a plain ``OSError`` for local read failures). The CLI
layer catches ``SpnctlError`` and ``OSError`` and turns them into a
non-zero exit code with a one-line message.
"""

from __future__ import annotations


class SpnctlError(Exception):
    """Base class for all spnctl errors."""


class InvalidArgumentError(SpnctlError):
    """A command argument was rejected before any I/O happened."""


class ResolutionError(SpnctlError):
    """A network or chain handle could not be constructed."""


class NotInitializedError(SpnctlError):
    """Expected local chain state (e.g. the genesis file) is missing."""

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class NetworkError(SpnctlError):
    """A query against the coordination network failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
