"""Exceptions raised by the notes client."""

from __future__ import annotations

import grpc


class NotesError(Exception):
    """Base class for notes client errors."""


class NotesConnectionError(NotesError, ConnectionError):
    """Raised when the channel is missing, closed, or cannot be established."""


class RpcError(NotesError):
    """Raised when a call fails in the transport or is rejected by the service."""

    def __init__(self, message: str, code: grpc.StatusCode | None = None, details: str = ""):
        super().__init__(message)
        self.code = code
        self.details = details


class NotFoundError(RpcError):
    """The service has no note with the requested id."""


class InvalidArgumentError(RpcError):
    """The service rejected the request payload."""


_ERRORS_BY_CODE: dict[grpc.StatusCode, type[RpcError]] = {
    grpc.StatusCode.NOT_FOUND: NotFoundError,
    grpc.StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
}


def from_grpc_error(exc: grpc.RpcError) -> RpcError:
    """Translate a grpc.RpcError into the matching RpcError subclass.

    Errors raised by a blocking stub also implement grpc.Call, which exposes
    the status code and details. Anything else keeps code None.
    """
    code = exc.code() if callable(getattr(exc, "code", None)) else None
    details = exc.details() if callable(getattr(exc, "details", None)) else ""
    details = details or ""

    error_cls = _ERRORS_BY_CODE.get(code, RpcError)
    if code is not None:
        message = f"{code.name}: {details}" if details else code.name
    else:
        message = details or str(exc) or exc.__class__.__name__
    return error_cls(message, code=code, details=details)
