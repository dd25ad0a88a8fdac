"""Pydantic models for the wire format of an analysis response.

These models are the only place where untyped JSON is looked at. Anything
that gets past them is already validated, so the domain objects are built
from typed attributes and never re-check the payload.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from .base import FieldValue

EntityFields = dict[str, FieldValue]


class SentencePayload(BaseModel):
    """One element of ``results.sentences``."""

    model_config = ConfigDict(extra="ignore")

    source: StrictStr
    type: StrictStr
    action: StrictStr | None = None
    agent: StrictStr | None = None
    polarity: StrictStr | None = None

    # Either keyed by category ({"location": [{...}]}) or a flat list of
    # entity objects carrying their category under "name".
    entities: dict[str, list[EntityFields]] | list[EntityFields] | None = None

    @field_validator("entities")
    @classmethod
    def validate_named_entities(
        cls, v: dict[str, list[EntityFields]] | list[EntityFields] | None
    ) -> dict[str, list[EntityFields]] | list[EntityFields] | None:
        """Every entity in the flat list layout must name its category."""
        if isinstance(v, list):
            for index, entity in enumerate(v):
                if not isinstance(entity.get("name"), str):
                    raise ValueError(
                        f"entity at index {index} has no string 'name' field"
                    )
        return v

    def grouped_entities(self) -> dict[str, list[EntityFields]]:
        """Entities grouped by category, in order of appearance."""
        if self.entities is None:
            return {}
        if isinstance(self.entities, dict):
            return self.entities

        grouped: dict[str, list[EntityFields]] = {}
        for entity in self.entities:
            fields = {key: value for key, value in entity.items() if key != "name"}
            grouped.setdefault(entity["name"], []).append(fields)
        return grouped


class ResultsPayload(BaseModel):
    """The ``results`` object of an analysis response."""

    model_config = ConfigDict(extra="ignore")

    status: int
    source: StrictStr
    version: StrictStr
    timestamp: StrictStr
    language: StrictStr
    intents: list[StrictStr]
    sentences: list[SentencePayload] = Field(..., min_length=1)

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> Any:
        """Only JSON numbers are accepted; pydantic rejects fractional ones."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("status must be an integer")
        return v


class ResponseEnvelope(BaseModel):
    """Top-level document: ``{"results": {...}}``."""

    model_config = ConfigDict(extra="ignore")

    results: ResultsPayload
