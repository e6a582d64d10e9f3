"""Uploader protocol — content storage abstraction."""
from typing import Protocol

from ..response import ResponseDto


class Uploader(Protocol):
    """Abstract interface for storing binary content and returning its hash."""

    async def upload_file(self, file: bytes) -> ResponseDto[dict[str, str]]: ...
