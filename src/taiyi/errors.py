"""Error hierarchy raised by the Taiyi SDK."""

from __future__ import annotations


class TaiyiError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TaiyiError, ValueError):
    """Invalid client or connection settings."""


class TransportError(TaiyiError):
    """The HTTP exchange failed or returned a non-success status."""

    def __init__(self, message: str, status: int | None = None, reason: str | None = None):
        super().__init__(message)
        self.status = status
        self.reason = reason


class ProtocolError(TaiyiError):
    """The backend answered with a failure envelope or a malformed payload."""

    def __init__(self, message: str, error_code: int | None = None):
        super().__init__(message)
        self.error_code = error_code


class SigningError(TaiyiError):
    """The request content could not be signed with the given key."""


class UsageError(TaiyiError, RuntimeError):
    """An operation was invoked before the session handshake completed."""
