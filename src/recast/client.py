"""Client for the Recast.AI natural language understanding API."""

from pathlib import Path

from recast.config import Settings, get_settings
from recast.domain import Response, parse_response
from recast.logs import get_logger
from recast.services.transport import (
    FilePayload,
    Payload,
    TextPayload,
    Transport,
    get_transport,
)

logger = get_logger()


class Client:
    """Sends text or voice files to Recast.AI and returns parsed responses.

    The token authenticates every request. The language, when set, forces
    the language of the inputs; leave it empty to let the API detect it.
    Both can be overridden per request with the ``token`` and ``language``
    keyword arguments, which win over the client values whenever given.
    """

    def __init__(
        self,
        token: str | None = None,
        language: str | None = None,
        *,
        transport: Transport | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the client.

        Args:
            token: Default API token (falls back to RECAST_TOKEN)
            language: Default language code (falls back to RECAST_LANGUAGE)
            transport: Transport to use instead of the configured one
            settings: Settings to use instead of the environment
        """
        if transport is None:
            transport = get_transport(settings or get_settings())

        # Explicit arguments win over configured defaults
        if token is not None:
            transport.set_token(token)
        if language is not None:
            transport.set_language(language)

        self.transport = transport

    def set_token(self, token: str) -> None:
        """Set the token used for requests that do not pass their own."""
        self.transport.set_token(token)

    def set_language(self, language: str | None) -> None:
        """Set the language used for requests that do not pass their own."""
        self.transport.set_language(language)

    def text_request(
        self,
        text: str,
        *,
        language: str | None = None,
        token: str | None = None,
    ) -> Response:
        """Analyse a text.

        Raises:
            TransportError: The request did not succeed
            MalformedPayload: The API answered with an unexpected body
        """
        return self._request(TextPayload(text=text, language=language, token=token))

    def file_request(
        self,
        path: str | Path,
        *,
        language: str | None = None,
        token: str | None = None,
    ) -> Response:
        """Analyse a recorded voice file (e.g. a .wav).

        Raises:
            OSError: The file cannot be read
            TransportError: The request did not succeed
            MalformedPayload: The API answered with an unexpected body
        """
        return self._request(FilePayload(path=path, language=language, token=token))

    def _request(self, payload: Payload) -> Response:
        body = self.transport.submit(payload)
        response = parse_response(body)
        logger.info(
            "recast_analysis_complete",
            kind="text" if isinstance(payload, TextPayload) else "file",
            language=response.language,
            intent=response.intents[0] if response.intents else None,
        )
        return response
