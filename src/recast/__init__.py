"""Client library for the Recast.AI natural language understanding API."""

from .client import Client
from .domain import (
    Entity,
    EntityFieldError,
    FieldTypeMismatch,
    FieldValue,
    MalformedPayload,
    MissingField,
    NoIntentFound,
    RecastError,
    Response,
    Sentence,
    parse_response,
)
from .services.transport import (
    FilePayload,
    HttpTransport,
    ReplayTransport,
    RequestFailed,
    RequestTimeout,
    ServiceUnavailable,
    TextPayload,
    Transport,
    TransportError,
)

__all__ = [
    "Client",
    "Entity",
    "EntityFieldError",
    "FieldTypeMismatch",
    "FieldValue",
    "FilePayload",
    "HttpTransport",
    "MalformedPayload",
    "MissingField",
    "NoIntentFound",
    "RecastError",
    "ReplayTransport",
    "RequestFailed",
    "RequestTimeout",
    "Response",
    "Sentence",
    "ServiceUnavailable",
    "TextPayload",
    "Transport",
    "TransportError",
    "parse_response",
]
