"""Repository for Location domain entity."""

from typing import Literal

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from location_validation.domain.common.exceptions import EntityNotFoundError
from location_validation.domain.common.value_objects.ids import LocationId
from location_validation.domain.location.entities.location import Location
from location_validation.infrastructure.location.mappers.location_mapper import LocationMapper
from location_validation.models import Location as LocationORM

logger = structlog.get_logger(__name__)


class LocationRepository:
    """Repository for Location domain entity."""

    def __init__(
        self, db: Session, name_match: Literal["exact", "case_insensitive"] = "exact"
    ) -> None:
        self.db = db
        self.name_match = name_match
        self.mapper = LocationMapper()

    def find_by_name(self, name: str | None) -> Location | None:
        """
        Find a location by name.

        When several locations share the name, a non-retired one is returned
        first, so that uniqueness checks see the active holder of the name.

        Args:
            name: The location name; blank names match nothing

        Returns:
            The location entity or None
        """
        if name is None or not name.strip():
            return None

        if self.name_match == "case_insensitive":
            condition = func.lower(LocationORM.name) == name.lower()
        else:
            condition = LocationORM.name == name

        stmt = (
            select(LocationORM)
            .where(condition)
            .order_by(LocationORM.retired, LocationORM.id)
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_uuid(self, uuid: str) -> Location | None:
        stmt = select(LocationORM).where(LocationORM.uuid == uuid)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id(self, location_id: LocationId) -> Location | None:
        orm_model = self.db.get(LocationORM, location_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, location: Location) -> Location:
        """
        Save a location entity.

        Args:
            location: The location entity to save

        Returns:
            Saved location entity with database-generated values

        Raises:
            EntityNotFoundError: If the parent location has not been saved
        """
        parent_location_id = None
        if location.parent_location is not None:
            parent = location.parent_location
            if not parent.id.is_assigned():
                raise EntityNotFoundError("Location", parent.uuid)
            parent_location_id = parent.id.value

        orm_model = None
        if location.id.is_assigned():
            orm_model = self.db.get(LocationORM, location.id.value)
            if orm_model is None:
                raise EntityNotFoundError("Location", location.id.value)

        orm_model = self.mapper.to_orm(location, orm_model, parent_location_id)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info("location_persisted", location_id=orm_model.id, name=orm_model.name)
        return self.mapper.to_domain(orm_model)
