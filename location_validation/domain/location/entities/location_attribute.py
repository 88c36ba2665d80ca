from dataclasses import dataclass

from location_validation.domain.common.entity import Entity, new_uuid
from location_validation.domain.common.value_objects.ids import LocationAttributeId
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)


@dataclass(eq=False, repr=False)
class LocationAttribute(Entity[LocationAttributeId]):
    """
    A value of a custom attribute attached to a location.

    The value is kept in its serialized form; the datatype handler of the
    attribute type decides whether it is valid.
    """

    id: LocationAttributeId
    uuid: str
    attribute_type: LocationAttributeType
    value_reference: str | None

    voided: bool = False
    void_reason: str | None = None

    def is_active(self) -> bool:
        return not self.voided

    def void(self, reason: str) -> None:
        self.voided = True
        self.void_reason = reason

    @classmethod
    def create(
        cls, attribute_type: LocationAttributeType, value_reference: str | None
    ) -> "LocationAttribute":
        """Factory for creating new attribute value."""
        return cls(
            id=LocationAttributeId.generate(),
            uuid=new_uuid(),
            attribute_type=attribute_type,
            value_reference=value_reference,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LocationAttributeId,
        uuid: str,
        attribute_type: LocationAttributeType,
        value_reference: str | None,
        voided: bool = False,
        void_reason: str | None = None,
    ) -> "LocationAttribute":
        """Factory for reconstituting attribute value from persistence."""
        return cls(
            id=id,
            uuid=uuid,
            attribute_type=attribute_type,
            value_reference=value_reference,
            voided=voided,
            void_reason=void_reason,
        )
