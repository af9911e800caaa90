"""Typed async client for the Revolt chat REST API."""

from revolt_api.client import RevoltClient
from revolt_api.config import Config, setup_logging
from revolt_api.errors import CodecError, CredentialError, RevoltError, TransportError

__all__ = [
    "CodecError",
    "Config",
    "CredentialError",
    "RevoltClient",
    "RevoltError",
    "TransportError",
    "setup_logging",
]
