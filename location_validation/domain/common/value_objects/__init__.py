"""Common value objects shared across all domain modules."""

from .ids import LocationAttributeId, LocationAttributeTypeId, LocationId

__all__ = [
    "LocationAttributeId",
    "LocationAttributeTypeId",
    "LocationId",
]
