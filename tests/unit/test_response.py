"""Unit tests for the ResponseDto contract and try_fail."""
from __future__ import annotations

import pytest

from tatum.errors import ApiError, RegistryError, TransportError, ValidationError
from tatum.response import (
    ErrorWithMessage,
    ResponseDto,
    ResponseStatus,
    to_error_response,
    try_fail,
)


class TestResponseDto:
    def test_ok(self) -> None:
        r = ResponseDto.ok({"txId": "0x1"})
        assert r.data == {"txId": "0x1"}
        assert r.error is None
        assert r.status is ResponseStatus.SUCCESS
        assert not r.is_error

    def test_ok_with_none_data(self) -> None:
        r = ResponseDto.ok(None)
        assert r.data is None
        assert not r.is_error

    def test_fail(self) -> None:
        err = ErrorWithMessage(code="api.failed", message="boom", status=500)
        r = ResponseDto.fail(err)
        assert r.data is None
        assert r.error is err
        assert r.is_error

    def test_frozen(self) -> None:
        r = ResponseDto.ok(1)
        with pytest.raises(AttributeError):
            r.data = 2  # type: ignore[misc]

    def test_to_error_response(self) -> None:
        err = ErrorWithMessage(code="network.failed", message="down")
        assert to_error_response(err) == ResponseDto.fail(err)


class TestTryFail:
    @pytest.mark.asyncio
    async def test_success(self) -> None:
        async def op() -> int:
            return 42

        assert await try_fail(op) == ResponseDto.ok(42)

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        async def op() -> int:
            raise TransportError("connection reset")

        r = await try_fail(op)
        assert r.error == ErrorWithMessage(
            code="network.failed", message="connection reset"
        )

    @pytest.mark.asyncio
    async def test_api_error_keeps_status(self) -> None:
        async def op() -> int:
            raise ApiError(503, "unavailable")

        r = await try_fail(op)
        assert r.error.code == "api.failed"
        assert r.error.status == 503
        assert r.error.message == "HTTP 503: unavailable"

    @pytest.mark.asyncio
    async def test_validation_error(self) -> None:
        async def op() -> int:
            raise ValidationError(422, "chain is required")

        r = await try_fail(op)
        assert r.error.code == "validation.failed"

    @pytest.mark.asyncio
    async def test_registry_error_propagates(self) -> None:
        async def op() -> int:
            raise RegistryError("missing")

        with pytest.raises(RegistryError):
            await try_fail(op)

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self) -> None:
        async def op() -> int:
            raise TypeError("bad input")

        with pytest.raises(TypeError):
            await try_fail(op)
