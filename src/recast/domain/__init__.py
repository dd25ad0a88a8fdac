"""Domain models for Recast responses."""

from .base import (
    EntityFieldError,
    FieldTypeMismatch,
    FieldValue,
    MalformedPayload,
    MissingField,
    NoIntentFound,
    RecastError,
)
from .entity import Entity
from .response import Response, parse_response
from .sentence import Sentence

__all__ = [
    "Entity",
    "EntityFieldError",
    "FieldTypeMismatch",
    "FieldValue",
    "MalformedPayload",
    "MissingField",
    "NoIntentFound",
    "RecastError",
    "Response",
    "Sentence",
    "parse_response",
]
