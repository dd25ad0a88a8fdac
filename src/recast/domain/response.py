"""Response domain model and the parser that builds it."""
from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import ValidationError

from recast.logs import get_logger
from recast.metrics import parse_errors

from .base import MalformedPayload, NoIntentFound
from .entity import Entity
from .schema import ResponseEnvelope, ResultsPayload
from .sentence import Sentence

logger = get_logger()

# Union member tags pydantic inserts in error locations, e.g. "list[...]"
_UNION_TAG = re.compile(r"^[\w-]+\[.*\]$")


@dataclass(frozen=True)
class Response:
    """The analysis of one submitted text or voice file.

    Built once by ``parse_response`` and never modified afterwards.
    """

    status: int
    source: str
    version: str
    language: str
    timestamp: str  # ISO-8601, kept verbatim
    intents: tuple[str, ...]
    sentences: tuple[Sentence, ...]

    __hash__ = None

    def __post_init__(self):
        """Store sequences as tuples."""
        object.__setattr__(self, "intents", tuple(self.intents))
        object.__setattr__(self, "sentences", tuple(self.sentences))

    @property
    def intent(self) -> str:
        """The best matching intent.

        Raises:
            NoIntentFound: The text matched no intent at all
        """
        if not self.intents:
            raise NoIntentFound("No intent found")
        return self.intents[0]

    @property
    def sentence(self) -> Sentence:
        """The first sentence of the input."""
        return self.sentences[0]

    def entity(self, name: str) -> Entity | None:
        """Return the first entity of a category across all sentences, or None."""
        for sentence in self.sentences:
            entity = sentence.entity(name)
            if entity is not None:
                return entity
        return None

    def entities(self, name: str) -> list[Entity]:
        """Return every entity of a category, sentence by sentence."""
        entities = []
        for sentence in self.sentences:
            entities.extend(sentence.entities(name))
        return entities

    def all_entities(self, *names: str) -> dict[str, list[Entity]]:
        """Return entities grouped by category across all sentences.

        A category found in several sentences is merged into one list,
        earlier sentences first. See ``Sentence.all_entities`` for how
        ``names`` filters the result.
        """
        entities: dict[str, list[Entity]] = {}
        for sentence in self.sentences:
            for name, group in sentence.all_entities(*names).items():
                entities.setdefault(name, []).extend(group)
        return entities

    @classmethod
    def from_payload(cls, results: ResultsPayload) -> Response:
        """Build a response from the validated ``results`` object."""
        return cls(
            status=results.status,
            source=results.source,
            version=results.version,
            language=results.language,
            timestamp=results.timestamp,
            intents=tuple(results.intents),
            sentences=tuple(Sentence.from_payload(s) for s in results.sentences),
        )

    @classmethod
    def from_json(cls, raw: str | bytes) -> Response:
        """Parse a raw response body. See ``parse_response``."""
        return parse_response(raw)


def _location(error: dict) -> str:
    return ".".join(
        str(part)
        for part in error.get("loc", ())
        if not (isinstance(part, str) and _UNION_TAG.match(part))
    )


def parse_response(raw: str | bytes) -> Response:
    """Parse a JSON response body into a Response.

    Parsing is all or nothing: the body is validated against the wire schema
    first and domain objects are only built from a valid document.

    Raises:
        MalformedPayload: Invalid JSON, or a missing or mistyped field
    """
    try:
        envelope = ResponseEnvelope.model_validate_json(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        location = _location(first) or None

        if first.get("type") == "json_invalid":
            message = f"Response body is not valid JSON: {first.get('msg', '')}"
            location = None
        else:
            message = f"Malformed response payload at '{location}': {first.get('msg', '')}"

        parse_errors.inc()
        logger.warning(
            "recast_payload_malformed",
            field=location,
            error_count=len(errors),
            error=first.get("msg"),
        )
        raise MalformedPayload(message, field=location, errors=errors) from e

    response = Response.from_payload(envelope.results)
    logger.debug(
        "recast_response_parsed",
        status=response.status,
        language=response.language,
        intents=len(response.intents),
        sentences=len(response.sentences),
    )
    return response
