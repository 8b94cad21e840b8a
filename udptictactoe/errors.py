"""Error codes, their messages and the exceptions that carry them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric error codes used by the networking layer."""

    NONE = 0
    FIRST = -128
    SOCKET = -127
    INVALID_ARGUMENT = -126
    ADDRESS = -125
    NETWORK = -124
    LAST = -123


_MESSAGES = {
    ErrorCode.SOCKET: "Socket init failed",
    ErrorCode.INVALID_ARGUMENT: "Function recieved invalid argument",
    ErrorCode.ADDRESS: "Failure address related",
    ErrorCode.NETWORK: "Network failure, check connection",
}

_INVALID = "Invalid error code"


def error_message(code: int) -> str:
    """Return the message for an error code, or a fallback for codes out of range."""
    if ErrorCode.FIRST < code < ErrorCode.LAST:
        return _MESSAGES.get(ErrorCode(code), _INVALID)
    return _INVALID


class GameNetError(Exception):
    """Base class for all errors raised by this package's networking code."""

    code: ErrorCode = ErrorCode.NONE

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = error_message(self.code)
        super().__init__(f"{message}: {detail}" if detail else message)


class SocketInitError(GameNetError):
    """A socket could not be created or configured."""

    code = ErrorCode.SOCKET


class InvalidArgumentError(GameNetError):
    """A function was given an argument it cannot use."""

    code = ErrorCode.INVALID_ARGUMENT


class AddressError(GameNetError):
    """An address could not be parsed or used."""

    code = ErrorCode.ADDRESS


class NetworkError(GameNetError):
    """Sending, receiving or binding failed."""

    code = ErrorCode.NETWORK