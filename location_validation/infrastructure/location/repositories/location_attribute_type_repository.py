"""Repository for LocationAttributeType domain entity."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)
from location_validation.infrastructure.location.mappers.location_attribute_type_mapper import (
    LocationAttributeTypeMapper,
)
from location_validation.models import LocationAttributeType as LocationAttributeTypeORM


class LocationAttributeTypeRepository:
    """Repository for LocationAttributeType domain entity."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LocationAttributeTypeMapper()

    def list_all_location_attribute_types(
        self, include_retired: bool = True
    ) -> list[LocationAttributeType]:
        """
        Get every attribute type ordered by name.

        Args:
            include_retired: Whether retired types are returned

        Returns:
            List of attribute type entities
        """
        stmt = select(LocationAttributeTypeORM).order_by(LocationAttributeTypeORM.name)
        if not include_retired:
            stmt = stmt.where(LocationAttributeTypeORM.retired.is_(False))
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, attribute_type: LocationAttributeType) -> LocationAttributeType:
        """Save an attribute type and return it with its database id."""
        orm_model = None
        if attribute_type.id.is_assigned():
            orm_model = self.db.get(LocationAttributeTypeORM, attribute_type.id.value)
        orm_model = self.mapper.to_orm(attribute_type, orm_model)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
