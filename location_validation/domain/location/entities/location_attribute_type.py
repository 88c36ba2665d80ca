"""Attribute type definitions for customizable location attributes."""

from dataclasses import dataclass

from location_validation.domain.common.entity import Entity, new_uuid
from location_validation.domain.common.exceptions import ValidationError
from location_validation.domain.common.value_objects.ids import LocationAttributeTypeId


@dataclass(eq=False, repr=False)
class LocationAttributeType(Entity[LocationAttributeTypeId]):
    """
    Definition of one kind of custom attribute a location may carry.

    Business Rules:
    - min_occurs is never negative
    - max_occurs, when set, is at least 1 and not lower than min_occurs
    - datatype is a key into the datatype registry; its meaning is owned there
    """

    # Identity
    id: LocationAttributeTypeId
    uuid: str

    # Definition
    name: str
    datatype: str
    datatype_config: str | None = None
    description: str | None = None
    min_occurs: int = 0
    max_occurs: int | None = None

    # Lifecycle
    retired: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Attribute type name cannot be empty", field="name")
        if self.min_occurs < 0:
            raise ValidationError(
                "min_occurs cannot be negative", field="min_occurs", value=self.min_occurs
            )
        if self.max_occurs is not None:
            if self.max_occurs < 1:
                raise ValidationError(
                    "max_occurs must be at least 1", field="max_occurs", value=self.max_occurs
                )
            if self.max_occurs < self.min_occurs:
                raise ValidationError(
                    "max_occurs cannot be lower than min_occurs",
                    field="max_occurs",
                    value=self.max_occurs,
                )

    def is_required(self) -> bool:
        return self.min_occurs > 0

    def has_occurrence_limits(self) -> bool:
        """Check whether occurrences of this type have to be counted."""
        return self.min_occurs > 0 or self.max_occurs is not None

    # Factory methods
    @classmethod
    def create(
        cls,
        name: str,
        datatype: str,
        datatype_config: str | None = None,
        description: str | None = None,
        min_occurs: int = 0,
        max_occurs: int | None = None,
    ) -> "LocationAttributeType":
        """Factory for creating new attribute type."""
        return cls(
            id=LocationAttributeTypeId.generate(),
            uuid=new_uuid(),
            name=name.strip(),
            datatype=datatype,
            datatype_config=datatype_config,
            description=description,
            min_occurs=min_occurs,
            max_occurs=max_occurs,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LocationAttributeTypeId,
        uuid: str,
        name: str,
        datatype: str,
        datatype_config: str | None = None,
        description: str | None = None,
        min_occurs: int = 0,
        max_occurs: int | None = None,
        retired: bool = False,
    ) -> "LocationAttributeType":
        """Factory for reconstituting attribute type from persistence."""
        return cls(
            id=id,
            uuid=uuid,
            name=name,
            datatype=datatype,
            datatype_config=datatype_config,
            description=description,
            min_occurs=min_occurs,
            max_occurs=max_occurs,
            retired=retired,
        )
