"""Identity primitives — Entity (compared by id) and ValueObject (by value).

INVARIANT: An entity's identifier is set at construction and never changes.
INVARIANT: A value object is immutable for its whole lifetime.

Both are pydantic models so subclasses can validate their identifier or
value with ordinary ``field_validator`` hooks. Equality accepts any member
of the same class lineage; anything else compares unequal, never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

IdT = TypeVar("IdT")
V = TypeVar("V")


def _same_lineage(left: object, right: object) -> bool:
    return isinstance(left, type(right)) or isinstance(right, type(left))


class Entity(BaseModel, Generic[IdT]):
    """Domain object whose equality is defined solely by its identifier.

    Other attributes stay mutable (and validated on assignment); only
    ``id`` is frozen.

    Usage::

        class Order(Entity[int]):
            total: float

        Order(id=7, total=1.0) == Order(id=7, total=99.0)  # True
    """

    model_config = ConfigDict(validate_assignment=True)

    id: IdT = Field(frozen=True)

    def equals(self, other: object) -> bool:
        """True iff *other* is a compatible Entity with an equal identifier."""
        if not isinstance(other, Entity):
            return False
        if not _same_lineage(self, other):
            return False
        return bool(self.id == other.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.id)


class ValueObject(BaseModel, Generic[V]):
    """Immutable wrapper whose equality is defined solely by its value.

    Constructed positionally (``Email("a@b.io")``). When validated as a
    nested field, a bare value is accepted and wrapped, and serialization
    emits the bare value, so value objects round-trip through JSON as the
    plain value they hold.
    """

    model_config = ConfigDict(frozen=True)

    value: V

    def __init__(self, value: V, /) -> None:
        super().__init__(value=value)

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_value(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and set(data) == {"value"}:
            return data
        return {"value": data}

    @model_serializer(mode="wrap")
    def _serialize_bare_value(self, handler: SerializerFunctionWrapHandler) -> Any:
        return handler(self)["value"]

    def equals(self, other: object) -> bool:
        """True iff *other* is a compatible ValueObject wrapping an equal value."""
        if not isinstance(other, ValueObject):
            return False
        if not _same_lineage(self, other):
            return False
        return bool(self.value == other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return str(self.value)
