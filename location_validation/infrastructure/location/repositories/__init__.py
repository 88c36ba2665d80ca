from .location_attribute_type_repository import LocationAttributeTypeRepository
from .location_repository import LocationRepository

__all__ = [
    "LocationAttributeTypeRepository",
    "LocationRepository",
]
