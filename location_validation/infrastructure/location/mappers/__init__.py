from .location_attribute_type_mapper import LocationAttributeTypeMapper
from .location_mapper import LocationMapper

__all__ = [
    "LocationAttributeTypeMapper",
    "LocationMapper",
]
