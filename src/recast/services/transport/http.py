"""HTTP transport to the Recast.AI API."""

import uuid
from pathlib import Path
from typing import Any

import httpx

from recast.config import DEFAULT_API_URL
from recast.logs import get_logger
from recast.metrics import track_request

from .base import (
    FilePayload,
    Payload,
    RequestFailed,
    RequestTimeout,
    ServiceUnavailable,
    TextPayload,
    resolve_options,
)

logger = get_logger()


class HttpTransport:
    """Transport that POSTs payloads to the Recast.AI API."""

    def __init__(
        self,
        token: str | None = None,
        language: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        http_transport: httpx.BaseTransport | None = None,
    ):
        """Initialize with the default token and language for every call.

        ``http_transport`` is handed to httpx as is; tests use it to plug in
        an ``httpx.MockTransport``.
        """
        self.token = token
        self.language = language
        self.api_url = api_url
        self.timeout = timeout
        self._http_transport = http_transport

    def set_token(self, token: str) -> None:
        """Change the default token."""
        self.token = token

    def set_language(self, language: str | None) -> None:
        """Change the default language ("" or None for auto-detection)."""
        self.language = language

    def submit(self, payload: Payload) -> str:
        """Send a text or voice file and return the raw response body."""
        if isinstance(payload, TextPayload):
            return self._submit_text(payload)
        if isinstance(payload, FilePayload):
            return self._submit_file(payload)
        raise TypeError(f"Unsupported payload type: {type(payload).__name__}")

    @track_request("text")
    def _submit_text(self, payload: TextPayload) -> str:
        token, language = resolve_options(payload, self.token, self.language)

        form = {"text": payload.text}
        if language is not None:
            form["language"] = language

        return self._post("text", token, data=form)

    @track_request("file")
    def _submit_file(self, payload: FilePayload) -> str:
        token, language = resolve_options(payload, self.token, self.language)

        # Read before connecting: a missing file must not cost a round trip
        path = Path(payload.path)
        content = path.read_bytes()

        form = {}
        if language is not None:
            form["language"] = language

        return self._post(
            "file",
            token,
            data=form,
            files={"voice": (path.name, content)},
        )

    def _post(self, kind: str, token: str, **request: Any) -> str:
        """Make one authenticated POST and return the body of a 2xx answer."""
        request_id = str(uuid.uuid4())
        headers = {"Authorization": f"Token {token}"}

        logger.info(
            "recast_request_start",
            request_id=request_id,
            kind=kind,
            url=self.api_url,
            has_token=bool(token),
            language=request.get("data", {}).get("language"),
        )

        try:
            with httpx.Client(
                timeout=self.timeout, transport=self._http_transport
            ) as client:
                response = client.post(self.api_url, headers=headers, **request)
        except httpx.TimeoutException as e:
            logger.error("recast_request_timeout", request_id=request_id, kind=kind)
            raise RequestTimeout(
                f"Recast API did not answer within {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "recast_request_unreachable",
                request_id=request_id,
                kind=kind,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ServiceUnavailable(
                f"Cannot reach Recast API at {self.api_url}: {e}"
            ) from e

        if not response.is_success:
            logger.error(
                "recast_request_failed",
                request_id=request_id,
                kind=kind,
                status_code=response.status_code,
                response_text=response.text[:500],
            )
            raise RequestFailed(
                response.status_code, response.reason_phrase, response.text
            )

        logger.info(
            "recast_request_complete",
            request_id=request_id,
            kind=kind,
            status_code=response.status_code,
            response_size=len(response.content),
        )
        return response.text
