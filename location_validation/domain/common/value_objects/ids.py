from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class LocationId(EntityId):
    """Strongly-typed location identifier."""

    value: int


@dataclass(frozen=True)
class LocationAttributeTypeId(EntityId):
    """Strongly-typed location attribute type identifier."""

    value: int


@dataclass(frozen=True)
class LocationAttributeId(EntityId):
    """Strongly-typed location attribute identifier."""

    value: int
