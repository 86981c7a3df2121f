"""
Exception classes for the futures client.

Every failure is raised as exactly one of the classes below, each carrying
the payload specific to where it came from, so callers can tell a retryable
transport failure from a fatal business rejection without parsing messages.
"""

from typing import Optional


class FapiError(Exception):
    """Base exception for all client errors."""
    pass


class BusinessError(FapiError):
    """The exchange understood the request and rejected it."""

    def __init__(self, code: int, msg: str, status_code: Optional[int] = None):
        super().__init__(f"Exchange error {code}: {msg}")
        self.code = code
        self.msg = msg
        self.status_code = status_code


class TransportError(FapiError):
    """Network or I/O failure below the request/response layer."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(FapiError):
    """A response body or stream frame did not match the expected shape."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def with_context(self, status_code: Optional[int], body: Optional[bytes]) -> "DecodeError":
        """Return a copy carrying the raw HTTP status and body."""
        return DecodeError(self.message, status_code=status_code, body=body)

    def __str__(self) -> str:
        if self.status_code is None and self.body is None:
            return self.message
        snippet = (self.body or b"")[:200].decode("utf-8", errors="replace")
        return f"{self.message} (Status {self.status_code}): {snippet}"


class FieldMissingError(FapiError):
    """A positional array response lacked an expected field."""

    def __init__(self, index: int, name: str):
        super().__init__(f"{name} at {index} is missing")
        self.index = index
        self.name = name


class StreamDisconnected(FapiError):
    """The streaming channel closed."""

    def __init__(self, code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(f"WebSocket was closed: code={code} reason={reason!r}")
        self.code = code
        self.reason = reason


class ConfigurationError(FapiError, ValueError):
    """Invalid local configuration, raised before any network call."""
    pass


class TimestampError(FapiError):
    """The clock could not produce a request timestamp."""
    pass
