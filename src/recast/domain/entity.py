"""Entity domain model."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .base import FieldValue, FieldTypeMismatch, MissingField

RAW_FIELD = "raw"


def _freeze(value):
    """Copy a decoded JSON value into read-only containers."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value):
    """Copy a frozen value back into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Entity:
    """An entity recognized in a sentence (a location, a pronoun, a date...).

    Fields are whatever the API sent for this category. They are copied on
    construction and exposed read-only, nested objects and arrays included.
    """

    name: str
    fields: Mapping[str, FieldValue]

    # Field values may be objects and arrays
    __hash__ = None

    def __post_init__(self):
        """Freeze the field mapping."""
        object.__setattr__(self, "fields", _freeze(self.fields))

    def field(self, name: str) -> FieldValue | None:
        """Return the value of a field, or None if the entity has no such field.

        Values keep their JSON type: numbers stay int/float, strings stay str,
        objects and arrays come back as fresh dicts and lists.
        """
        return _thaw(self.fields.get(name))

    def has_field(self, name: str) -> bool:
        """Check whether the field exists (even if its value is null)."""
        return name in self.fields

    @property
    def raw(self) -> str:
        """The text span that matched this entity, verbatim."""
        if RAW_FIELD not in self.fields:
            raise MissingField(f"Entity '{self.name}' has no '{RAW_FIELD}' field")

        value = self.fields[RAW_FIELD]
        if not isinstance(value, str):
            raise FieldTypeMismatch(
                f"Entity '{self.name}' field '{RAW_FIELD}' must be a string, "
                f"got {type(value).__name__}"
            )
        return value

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, FieldValue]) -> Entity:
        """Build an entity of the given category from its decoded fields."""
        return cls(name=name, fields=data)

    def __repr__(self) -> str:
        return f"Entity({self.name!r}, raw={self.fields.get(RAW_FIELD)!r})"
