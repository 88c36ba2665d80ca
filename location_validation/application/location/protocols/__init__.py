from .attribute_type_registry import LocationAttributeTypeRegistryProtocol
from .attribute_validator import CustomizableAttributeValidatorProtocol
from .location_repository import LocationLookupProtocol, LocationRepositoryProtocol

__all__ = [
    "CustomizableAttributeValidatorProtocol",
    "LocationAttributeTypeRegistryProtocol",
    "LocationLookupProtocol",
    "LocationRepositoryProtocol",
]
