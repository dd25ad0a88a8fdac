"""Transports that carry analysis requests to the API."""

from .base import (
    FilePayload,
    Payload,
    RequestFailed,
    RequestTimeout,
    ServiceUnavailable,
    TextPayload,
    Transport,
    TransportError,
    resolve_options,
)
from .factory import get_transport
from .http import HttpTransport
from .replay import ReplayTransport

__all__ = [
    "FilePayload",
    "HttpTransport",
    "Payload",
    "ReplayTransport",
    "RequestFailed",
    "RequestTimeout",
    "ServiceUnavailable",
    "TextPayload",
    "Transport",
    "TransportError",
    "get_transport",
    "resolve_options",
]
