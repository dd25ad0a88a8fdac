"""Base protocol, payloads and exceptions for transports."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from recast.domain.base import RecastError


class TransportError(RecastError):
    """Base exception for all transport failures.

    Attributes:
        status_code: HTTP status, when the API answered at all
        reason: HTTP reason phrase, when the API answered at all
        body: Raw response body text, when the API answered at all
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class RequestFailed(TransportError):  # noqa: N818
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str):
        super().__init__(
            f"Request failed: {status_code} {reason} ({body})",
            status_code=status_code,
            reason=reason,
            body=body,
        )


class RequestTimeout(TransportError):  # noqa: N818
    """Raised when the API does not answer in time."""

    pass


class ServiceUnavailable(TransportError):  # noqa: N818
    """Raised when the API is unreachable."""

    pass


@dataclass(frozen=True)
class TextPayload:
    """Text to analyse, with optional per-call overrides."""

    text: str
    language: str | None = None
    token: str | None = None


@dataclass(frozen=True)
class FilePayload:
    """Voice file to analyse, with optional per-call overrides."""

    path: str | Path
    language: str | None = None
    token: str | None = None


Payload = TextPayload | FilePayload


def resolve_options(
    payload: Payload,
    default_token: str | None,
    default_language: str | None,
) -> tuple[str, str | None]:
    """Merge per-call overrides with the transport defaults.

    Contract:
    - A per-call value wins whenever it is given (not None), even if empty
    - Otherwise the transport default applies
    - A resolved language of "" or None means automatic detection: the
      language is not sent at all
    - A request must end up with a non-empty token

    Returns:
        (token, language) where language is None for automatic detection

    Raises:
        TransportError: No token is available for this request
    """
    token = payload.token if payload.token is not None else default_token
    language = payload.language if payload.language is not None else default_language

    if not token:
        raise TransportError(
            "No API token configured. Pass token= to the client or the request, "
            "or set RECAST_TOKEN."
        )
    return token, language or None


class Transport(Protocol):
    """Protocol for transports.

    Contract:
    - submit() returns the raw body of a successful response, unparsed
    - All failures raise TransportError subclasses (reading a missing voice
      file raises the OSError from the filesystem)
    - A non-success answer is never returned as a body
    - One call, one round trip: no retries, no caching
    """

    def set_token(self, token: str) -> None:
        """Change the default token used when a call gives none."""
        ...

    def set_language(self, language: str | None) -> None:
        """Change the default language used when a call gives none."""
        ...

    def submit(self, payload: Payload) -> str:
        """Send one payload for analysis.

        Args:
            payload: Text or voice file, with optional overrides

        Returns:
            The raw JSON body of the response

        Raises:
            RequestFailed: The API answered with a non-success status
            RequestTimeout: The API did not answer in time
            ServiceUnavailable: The API could not be reached
        """
        ...
