"""Error code definitions and exception types for fluxstudio."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error category codes for generation operations."""

    INTERNAL = "INTERNAL"
    TRANSPORT = "TRANSPORT"
    API = "API"
    RESPONSE_PARSE = "RESPONSE_PARSE"
    IO = "IO"
    SERIALIZATION = "SERIALIZATION"


class FluxStudioError(Exception):
    """Base exception for every failure raised by fluxstudio."""

    error_code: ErrorCode = ErrorCode.INTERNAL

    def __init__(self, message: str, original_exception: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class TransportError(FluxStudioError):
    """Network, DNS, TLS or timeout failure, or a non-2xx asset download."""

    error_code = ErrorCode.TRANSPORT


class ApiError(FluxStudioError):
    """Non-2xx response from a remote API."""

    error_code = ErrorCode.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        original_exception: Exception | None = None,
    ):
        super().__init__(message, original_exception=original_exception)
        self.status_code = status_code
        self.body = body


class ResponseParseError(FluxStudioError):
    """Response body did not match the expected shape."""

    error_code = ErrorCode.RESPONSE_PARSE


class IoError(FluxStudioError):
    """Filesystem create or write failure."""

    error_code = ErrorCode.IO


class SerializationError(FluxStudioError):
    """A record could not be encoded as JSON."""

    error_code = ErrorCode.SERIALIZATION
