"""Mapper for LocationAttributeType ORM ↔ Domain conversion."""

from location_validation.domain.common.value_objects.ids import LocationAttributeTypeId
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)
from location_validation.models import LocationAttributeType as LocationAttributeTypeORM


class LocationAttributeTypeMapper:
    """Mapper for LocationAttributeType ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LocationAttributeTypeORM) -> LocationAttributeType:
        """Convert ORM model to domain entity."""
        return LocationAttributeType.create_with_id(
            id=LocationAttributeTypeId(orm_model.id),
            uuid=orm_model.uuid,
            name=orm_model.name,
            datatype=orm_model.datatype,
            datatype_config=orm_model.datatype_config,
            description=orm_model.description,
            min_occurs=orm_model.min_occurs,
            max_occurs=orm_model.max_occurs,
            retired=orm_model.retired,
        )

    def to_orm(
        self,
        domain_entity: LocationAttributeType,
        orm_model: LocationAttributeTypeORM | None = None,
    ) -> LocationAttributeTypeORM:
        """Convert domain entity to ORM model."""
        orm_model = orm_model or LocationAttributeTypeORM(uuid=domain_entity.uuid)
        orm_model.name = domain_entity.name
        orm_model.description = domain_entity.description
        orm_model.datatype = domain_entity.datatype
        orm_model.datatype_config = domain_entity.datatype_config
        orm_model.min_occurs = domain_entity.min_occurs
        orm_model.max_occurs = domain_entity.max_occurs
        orm_model.retired = domain_entity.retired
        return orm_model
