"""Exceptions raised by the Revolt API client."""

from __future__ import annotations


class RevoltError(Exception):
    """Base class for every error raised by this package."""


class TransportError(RevoltError):
    """The HTTP round trip failed: connection, DNS, TLS or a non-2xx status.

    ``status_code`` is set when the service answered with an error status and
    is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CodecError(RevoltError):
    """The response body was not JSON or did not match the expected schema."""


class CredentialError(RevoltError):
    """The token cannot be sent as an HTTP header value."""
