"""Exception hierarchy for the Tatum client."""
from __future__ import annotations

from typing import Any


class TatumError(Exception):
    """Base class for all client errors."""


class RemoteError(TatumError):
    """Failure talking to the remote API (converted into a ResponseDto error)."""

    code = "remote.failed"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TransportError(RemoteError):
    """The API could not be reached or its response could not be read."""

    code = "network.failed"


class ApiError(RemoteError):
    """The API answered with a non-success status."""

    code = "api.failed"

    def __init__(self, status: int, message: str, body: Any = None) -> None:
        self.status = status
        self.body = body
        super().__init__(f"HTTP {status}: {message}")


class ValidationError(ApiError):
    """The API rejected the request payload (400 / 422)."""

    code = "validation.failed"


class RegistryError(TatumError, LookupError):
    """A collaborator was requested that the registry cannot provide."""
