"""Replay transport for testing and offline use."""

from http import HTTPStatus
from pathlib import Path

from .base import Payload, RequestFailed


class ReplayTransport:
    """Transport that answers every call with a recorded body.

    Useful in tests and for replaying a saved API response without network
    access. A non-2xx ``status_code`` makes every call fail the way the API
    would.
    """

    def __init__(self, body: str, status_code: int = 200):
        """Initialize with the body (and status) to answer with."""
        self.body = body
        self.status_code = status_code
        self.token: str | None = None
        self.language: str | None = None
        self._call_count = 0
        self._last_payload: Payload | None = None

    @classmethod
    def from_file(cls, path: str | Path, status_code: int = 200) -> "ReplayTransport":
        """Load a recorded response body from disk."""
        return cls(Path(path).read_text(encoding="utf-8"), status_code=status_code)

    @property
    def call_count(self) -> int:
        """Number of payloads submitted so far."""
        return self._call_count

    @property
    def last_payload(self) -> Payload | None:
        """The most recent payload, or None before the first call."""
        return self._last_payload

    def set_token(self, token: str) -> None:
        """Record the default token (not used for replay)."""
        self.token = token

    def set_language(self, language: str | None) -> None:
        """Record the default language (not used for replay)."""
        self.language = language

    def submit(self, payload: Payload) -> str:
        """Return the recorded body, or fail with the recorded status."""
        # Track calls for testing
        self._call_count += 1
        self._last_payload = payload

        if not 200 <= self.status_code < 300:
            try:
                reason = HTTPStatus(self.status_code).phrase
            except ValueError:
                reason = ""
            raise RequestFailed(self.status_code, reason, self.body)

        return self.body
