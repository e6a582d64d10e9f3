"""Connector protocol — HTTP transport abstraction."""
from typing import Any, Mapping, Protocol


class Connector(Protocol):
    """Abstract interface for issuing requests against the Tatum API."""

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    async def post(self, path: str, body: Mapping[str, Any] | None = None) -> Any: ...

    async def upload_file(
        self, path: str, file: bytes, version: str | None = None
    ) -> Any: ...
