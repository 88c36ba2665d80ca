"""Location entity: a node of the place hierarchy."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from location_validation.domain.common.entity import Entity, new_uuid
from location_validation.domain.common.exceptions import ValidationError
from location_validation.domain.common.value_objects.ids import LocationId
from location_validation.domain.location.entities.location_attribute import LocationAttribute
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)


@dataclass(eq=False, repr=False)
class Location(Entity[LocationId]):
    """
    Location entity.

    Represents a site, building, ward or any other place. Locations form a
    hierarchy through ``parent_location``.

    Construction is deliberately permissive: a location loaded from a form or
    from storage may break the business rules (blank name, retired without a
    reason, a parent chain that loops back), and it must still be
    representable so that LocationValidator can report every violation and the
    caller can re-display it.
    """

    # Identity
    id: LocationId
    uuid: str

    # Content
    name: str | None
    description: str | None = None

    # Hierarchy
    parent_location: "Location | None" = None
    child_locations: list["Location"] = field(default_factory=list)

    # Custom attributes
    attributes: list[LocationAttribute] = field(default_factory=list)

    # Retirement
    retired: bool = False
    retire_reason: str | None = None
    retired_by: str | None = None
    date_retired: datetime | None = None

    # Retirement
    def retire(self, reason: str, retired_by: str | None = None) -> None:
        """Retire the location. A reason is mandatory."""
        if not reason or not reason.strip():
            raise ValidationError("Retire reason cannot be empty", field="retire_reason")
        self.retired = True
        self.retire_reason = reason.strip()
        self.retired_by = retired_by
        self.date_retired = datetime.now(UTC)

    def unretire(self) -> None:
        self.retired = False
        self.retire_reason = None
        self.retired_by = None
        self.date_retired = None

    # Hierarchy
    def set_parent_location(self, parent: "Location | None") -> None:
        """Move this location under ``parent``, keeping child lists in sync."""
        if self.parent_location is not None:
            self.parent_location.child_locations = [
                child for child in self.parent_location.child_locations if child is not self
            ]
        self.parent_location = parent
        if parent is not None and not any(child is self for child in parent.child_locations):
            parent.child_locations.append(self)

    def ancestors(self) -> list["Location"]:
        """
        Get all ancestors, ordered from parent to root.

        The walk stops at the root, or as soon as it reaches a location it has
        already returned (or this location itself), so a corrupt cyclic
        hierarchy yields a finite list.
        """
        ancestors: list[Location] = []
        seen: set[int] = {id(self)}
        current = self.parent_location
        while current is not None and id(current) not in seen:
            ancestors.append(current)
            seen.add(id(current))
            current = current.parent_location
        return ancestors

    # Attributes
    def add_attribute(self, attribute: LocationAttribute) -> None:
        self.attributes.append(attribute)

    def active_attributes(self) -> list[LocationAttribute]:
        """Get attributes that have not been voided."""
        return [attribute for attribute in self.attributes if attribute.is_active()]

    def active_attributes_of_type(
        self, attribute_type: LocationAttributeType
    ) -> list[LocationAttribute]:
        return [
            attribute
            for attribute in self.active_attributes()
            if attribute.attribute_type == attribute_type
        ]

    # Factory methods
    @classmethod
    def create(
        cls,
        name: str | None,
        description: str | None = None,
        parent_location: "Location | None" = None,
    ) -> "Location":
        """Factory for creating new location."""
        location = cls(
            id=LocationId.generate(),
            uuid=new_uuid(),
            name=name.strip() if name else name,
            description=description,
        )
        if parent_location is not None:
            location.set_parent_location(parent_location)
        return location

    @classmethod
    def create_with_id(
        cls,
        id: LocationId,
        uuid: str,
        name: str | None,
        description: str | None = None,
        retired: bool = False,
        retire_reason: str | None = None,
        retired_by: str | None = None,
        date_retired: datetime | None = None,
    ) -> "Location":
        """
        Factory for reconstituting location from persistence.

        Parent links and attributes are attached afterwards by the mapper,
        since the parent may itself still be under construction.
        """
        return cls(
            id=id,
            uuid=uuid,
            name=name,
            description=description,
            retired=retired,
            retire_reason=retire_reason,
            retired_by=retired_by,
            date_retired=date_retired,
        )
