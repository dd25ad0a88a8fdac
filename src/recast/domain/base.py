"""Base errors and value types for the response model."""

from typing import Any

from pydantic import JsonValue

# A single entity field as sent by the API: number, string, boolean, null,
# or a nested list/object of the same.
FieldValue = JsonValue


class RecastError(Exception):
    """Base exception for everything raised by this library."""

    pass


class MalformedPayload(RecastError):  # noqa: N818
    """Raised when a response body does not match the expected shape.

    Attributes:
        field: Dotted location of the first offending field
            (e.g. ``results.status``), or None when the body is not JSON.
        errors: Full list of validation errors, as reported by pydantic.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.errors = errors or []


class NoIntentFound(RecastError):  # noqa: N818
    """Raised when the top intent is requested but none matched."""

    pass


class EntityFieldError(RecastError):
    """Base exception for an entity field that breaks the API contract."""

    pass


class MissingField(EntityFieldError, KeyError):  # noqa: N818
    """Raised when a guaranteed entity field is absent."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class FieldTypeMismatch(EntityFieldError, TypeError):  # noqa: N818
    """Raised when a guaranteed entity field has the wrong type."""

    pass
