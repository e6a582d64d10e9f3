"""HTTP connector for the Tatum API."""
from __future__ import annotations

import asyncio
import json
import logging
import ssl
from typing import Any, Mapping

import aiohttp
import certifi

from .config import TatumConfig
from .errors import ApiError, TransportError, ValidationError

logger = logging.getLogger(__name__)

_VALIDATION_STATUSES = (400, 422)


def serialize_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Convert query parameters to their wire form.

    ``None`` values are dropped, booleans become ``true``/``false`` and strings
    are passed through untouched.
    """
    if not params:
        return {}

    serialized: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            serialized[key] = "true" if value else "false"
        else:
            serialized[key] = str(value)
    return serialized


class TatumConnector:
    """Issue single-attempt requests against the Tatum API."""

    def __init__(self, config: TatumConfig) -> None:
        self.base_url = config.base_url.rstrip("/")
        self.version = config.version
        self.api_key = config.api_key
        self.timeout = config.timeout
        self.verbose = config.verbose

    def _url(self, path: str, version: str | None = None) -> str:
        return f"{self.base_url}/{version or self.version}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._request("GET", self._url(path), params=serialize_params(params))

    async def post(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self._request("POST", self._url(path), json=dict(body or {}))

    async def upload_file(
        self, path: str, file: bytes, version: str | None = None
    ) -> Any:
        form = aiohttp.FormData()
        form.add_field("file", file, filename="file", content_type="application/octet-stream")
        return await self._request("POST", self._url(path, version), data=form)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        log = logger.info if self.verbose else logger.debug
        log("%s %s params=%s", method, url, kwargs.get("params"))

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        try:
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.request(
                    method,
                    url,
                    headers=self._headers(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    **kwargs,
                ) as response:
                    body = await self._read_body(response)
                    log("%s %s -> %s", method, url, response.status)

                    if response.status >= 400:
                        raise self._status_error(response.status, body)
                    return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        raw = await response.read()
        text = raw.decode("utf-8", errors="replace")
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError:
            if response.status >= 400:
                return text
            raise TransportError(f"Unparseable response body: {text[:200]}")

    @staticmethod
    def _status_error(status: int, body: Any) -> ApiError:
        message = body.get("message", "") if isinstance(body, dict) else str(body or "")
        if status in _VALIDATION_STATUSES:
            return ValidationError(status, message, body)
        return ApiError(status, message, body)
