"""Database models."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from location_validation.database import Base


class Location(Base):
    """Location model; parent_location_id forms the hierarchy."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    uuid: Mapped[str] = mapped_column(String(38), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id"), nullable=True, index=True
    )
    retired: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    retire_reason: Mapped[str | None] = mapped_column(String(255), nullable=True)
    retired_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_retired: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    parent_location: Mapped[Optional["Location"]] = relationship(
        remote_side=[id], back_populates="child_locations"
    )
    child_locations: Mapped[list["Location"]] = relationship(back_populates="parent_location")
    attributes: Mapped[list["LocationAttribute"]] = relationship(
        back_populates="location", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Location."""
        return f"<Location(id={self.id}, name='{self.name}')>"


class LocationAttributeType(Base):
    """Definition of a customizable location attribute."""

    __tablename__ = "location_attribute_types"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    uuid: Mapped[str] = mapped_column(String(38), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    datatype: Mapped[str] = mapped_column(String(255), nullable=False)
    datatype_config: Mapped[str | None] = mapped_column(Text, nullable=True)
    min_occurs: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    max_occurs: Mapped[int | None] = mapped_column(Integer, nullable=True)
    retired: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        """String representation of LocationAttributeType."""
        return f"<LocationAttributeType(id={self.id}, name='{self.name}')>"


class LocationAttribute(Base):
    """Serialized value of a customizable attribute of a location."""

    __tablename__ = "location_attributes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    uuid: Mapped[str] = mapped_column(String(38), unique=True, nullable=False)
    location_id: Mapped[int] = mapped_column(ForeignKey("locations.id"), nullable=False)
    attribute_type_id: Mapped[int] = mapped_column(
        ForeignKey("location_attribute_types.id"), nullable=False
    )
    value_reference: Mapped[str | None] = mapped_column(Text, nullable=True)
    voided: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    void_reason: Mapped[str | None] = mapped_column(String(255), nullable=True)

    location: Mapped[Location] = relationship(back_populates="attributes")
    attribute_type: Mapped[LocationAttributeType] = relationship()

    def __repr__(self) -> str:
        """String representation of LocationAttribute."""
        return f"<LocationAttribute(id={self.id}, value='{self.value_reference}')>"
