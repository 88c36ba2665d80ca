"""Mapper for Location ORM ↔ Domain conversion."""

from location_validation.domain.common.value_objects.ids import LocationAttributeId, LocationId
from location_validation.domain.location.entities.location import Location
from location_validation.domain.location.entities.location_attribute import LocationAttribute
from location_validation.infrastructure.location.mappers.location_attribute_type_mapper import (
    LocationAttributeTypeMapper,
)
from location_validation.models import Location as LocationORM
from location_validation.models import LocationAttribute as LocationAttributeORM


class LocationMapper:
    """
    Mapper for Location ORM ↔ Domain conversion.

    Parent links are mapped through a cache keyed by primary key, so every row
    becomes exactly one domain object and a corrupt cyclic parent chain maps to
    a cyclic object graph instead of recursing forever.
    """

    def __init__(self) -> None:
        self.attribute_type_mapper = LocationAttributeTypeMapper()

    def to_domain(
        self, orm_model: LocationORM, cache: dict[int, Location] | None = None
    ) -> Location:
        """Convert ORM model, with its chain of ancestors, to a domain entity."""
        cache = {} if cache is None else cache

        # Collect the rows not mapped yet, walking up until the root, a mapped
        # row, or a row already collected.
        pending: list[LocationORM] = []
        current: LocationORM | None = orm_model
        while current is not None and current.id not in cache:
            cache[current.id] = self._to_domain_without_parent(current)
            pending.append(current)
            current = current.parent_location

        for row in pending:
            parent = row.parent_location
            cache[row.id].parent_location = cache[parent.id] if parent is not None else None

        return cache[orm_model.id]

    def _to_domain_without_parent(self, orm_model: LocationORM) -> Location:
        location = Location.create_with_id(
            id=LocationId(orm_model.id),
            uuid=orm_model.uuid,
            name=orm_model.name,
            description=orm_model.description,
            retired=orm_model.retired,
            retire_reason=orm_model.retire_reason,
            retired_by=orm_model.retired_by,
            date_retired=orm_model.date_retired,
        )
        for attribute in orm_model.attributes:
            location.add_attribute(
                LocationAttribute.create_with_id(
                    id=LocationAttributeId(attribute.id),
                    uuid=attribute.uuid,
                    attribute_type=self.attribute_type_mapper.to_domain(attribute.attribute_type),
                    value_reference=attribute.value_reference,
                    voided=attribute.voided,
                    void_reason=attribute.void_reason,
                )
            )
        return location

    def to_orm(
        self,
        domain_entity: Location,
        orm_model: LocationORM | None = None,
        parent_location_id: int | None = None,
    ) -> LocationORM:
        """
        Convert domain entity to ORM model.

        Attribute rows are matched by uuid; attribute types must already be
        persisted, their ids are taken from the domain entities.
        """
        orm_model = orm_model or LocationORM(uuid=domain_entity.uuid)
        orm_model.name = domain_entity.name or ""
        orm_model.description = domain_entity.description
        orm_model.parent_location_id = parent_location_id
        orm_model.retired = domain_entity.retired
        orm_model.retire_reason = domain_entity.retire_reason
        orm_model.retired_by = domain_entity.retired_by
        orm_model.date_retired = domain_entity.date_retired

        # Rows without a domain counterpart are removed (delete-orphan cascade).
        kept = {attribute.uuid for attribute in domain_entity.attributes}
        for row in [row for row in orm_model.attributes if row.uuid not in kept]:
            orm_model.attributes.remove(row)

        existing = {attribute.uuid: attribute for attribute in orm_model.attributes}
        for attribute in domain_entity.attributes:
            row = existing.get(attribute.uuid)
            if row is None:
                row = LocationAttributeORM(uuid=attribute.uuid)
                orm_model.attributes.append(row)
            row.attribute_type_id = attribute.attribute_type.id.value
            row.value_reference = attribute.value_reference
            row.voided = attribute.voided
            row.void_reason = attribute.void_reason
        return orm_model
