"""Uniform result wrapper returned by every remote operation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, TypeVar

from .errors import ApiError, RemoteError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResponseStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class ErrorWithMessage:
    """Stable description of a failed remote call."""

    code: str
    message: str
    status: int | None = None


@dataclass(frozen=True)
class ResponseDto(Generic[T]):
    """Either ``data`` (on success) or ``error`` (on failure), never both.

    ``data`` may be ``None`` on success when the API found nothing.
    """

    data: T | None
    status: ResponseStatus
    error: ErrorWithMessage | None = None

    @classmethod
    def ok(cls, data: T | None) -> ResponseDto[T]:
        return cls(data=data, status=ResponseStatus.SUCCESS)

    @classmethod
    def fail(cls, error: ErrorWithMessage) -> ResponseDto[T]:
        return cls(data=None, status=ResponseStatus.ERROR, error=error)

    @property
    def is_error(self) -> bool:
        return self.status is ResponseStatus.ERROR


def to_error_with_message(err: RemoteError) -> ErrorWithMessage:
    status = err.status if isinstance(err, ApiError) else None
    return ErrorWithMessage(code=err.code, message=err.message, status=status)


def to_error_response(error: ErrorWithMessage) -> ResponseDto[T]:
    """Re-wrap an error produced by an earlier step."""
    return ResponseDto.fail(error)


async def try_fail(operation: Callable[[], Awaitable[T]]) -> ResponseDto[T]:
    """Await ``operation`` and fold remote failures into the result.

    Only :class:`RemoteError` is caught. Registry and programming errors
    propagate to the caller.
    """
    try:
        return ResponseDto.ok(await operation())
    except RemoteError as e:
        logger.warning("Remote call failed [%s]: %s", e.code, e.message)
        return to_error_response(to_error_with_message(e))
