from typing import Protocol

from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)


class LocationAttributeTypeRegistryProtocol(Protocol):
    def list_all_location_attribute_types(self) -> list[LocationAttributeType]:
        """Every known location attribute type, retired ones included, in a stable order."""
        ...
