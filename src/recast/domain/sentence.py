"""Sentence domain model."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .entity import Entity
from .schema import SentencePayload


@dataclass(frozen=True)
class Sentence:
    """One sentence of the analysed text, with its semantic labels and entities."""

    source: str
    type: str  # assert, command, wh-query, yn-query...
    action: str = ""
    agent: str = ""
    polarity: str = ""
    entities_by_name: Mapping[str, tuple[Entity, ...]] = field(default_factory=dict)

    # Entities hold JSON objects and arrays
    __hash__ = None

    def __post_init__(self):
        """Freeze the entity grouping and check it is consistent.

        Categories with no entities are dropped.
        """
        grouped = {
            name: tuple(group) for name, group in self.entities_by_name.items() if group
        }
        for name, group in grouped.items():
            for entity in group:
                if entity.name != name:
                    raise ValueError(
                        f"Entity '{entity.name}' grouped under category '{name}'"
                    )
        object.__setattr__(self, "entities_by_name", MappingProxyType(grouped))

    def entity(self, name: str) -> Entity | None:
        """Return the first entity of a category, or None."""
        group = self.entities_by_name.get(name)
        return group[0] if group else None

    def entities(self, name: str) -> list[Entity]:
        """Return every entity of a category, in order of appearance."""
        return list(self.entities_by_name.get(name, ()))

    def all_entities(self, *names: str) -> dict[str, list[Entity]]:
        """Return entities grouped by category.

        Called without names, every category that matched in the sentence is
        returned.
        Called with names, only the categories that actually matched are
        included; unknown names are left out rather than mapped to [].
        """
        if not names:
            return {name: list(group) for name, group in self.entities_by_name.items()}

        result = {}
        for name in names:
            group = self.entities_by_name.get(name)
            if group:
                result[name] = list(group)
        return result

    @classmethod
    def from_payload(cls, payload: SentencePayload) -> Sentence:
        """Build a sentence (and its entities) from its validated wire model."""
        return cls(
            source=payload.source,
            type=payload.type,
            action=payload.action or "",
            agent=payload.agent or "",
            polarity=payload.polarity or "",
            entities_by_name={
                name: tuple(Entity.from_dict(name, fields) for fields in group)
                for name, group in payload.grouped_entities().items()
            },
        )
