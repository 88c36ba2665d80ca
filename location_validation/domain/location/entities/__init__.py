from .location import Location
from .location_attribute import LocationAttribute
from .location_attribute_type import LocationAttributeType

__all__ = [
    "Location",
    "LocationAttribute",
    "LocationAttributeType",
]
