"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Locations and their attribute types carry two identities: a database id
assigned on save, and a ``uuid`` that is stable from creation onwards. Equality
uses the ``uuid`` so that a location can be compared with a copy loaded
separately before either of them has been persisted.

Example:
    @dataclass(eq=False)
    class Location(Entity[LocationId]):
        id: LocationId
        uuid: str
        name: str | None
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an integer database key.
    ``0`` is the placeholder used before the entity has been persisted.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Usually these are set by the database"""
        return cls(0)

    def is_assigned(self) -> bool:
        """Check whether the database has assigned a real key."""
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


def new_uuid() -> str:
    """Generate a fresh identity token for a new entity."""
    return str(uuid4())


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, retired)

    Subclasses must have an 'id' attribute of type IdType and a 'uuid' string,
    and must be declared with ``@dataclass(eq=False)`` so these methods are kept.
    """

    id: IdType
    uuid: str

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return False
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, uuid={self.uuid})"
