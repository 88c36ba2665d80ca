"""Tests for Location entity."""

import pytest

from location_validation.domain.common.exceptions import ValidationError
from location_validation.domain.common.value_objects.ids import LocationId
from location_validation.domain.location.entities.location import Location
from location_validation.domain.location.entities.location_attribute import LocationAttribute
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)


class TestLocationIdentity:
    def test_create_assigns_uuid_and_placeholder_id(self) -> None:
        location = Location.create("  Clinic A  ")
        assert location.name == "Clinic A"
        assert location.id == LocationId(0)
        assert not location.id.is_assigned()
        assert location.uuid

    def test_equality_uses_uuid(self) -> None:
        original = Location.create("Clinic A")
        copy = Location.create_with_id(id=LocationId(5), uuid=original.uuid, name="Renamed")
        other = Location.create("Clinic A")

        assert original == copy
        assert hash(original) == hash(copy)
        assert original != other

    def test_repr_does_not_follow_parent_cycle(self) -> None:
        a = Location.create("A")
        b = Location.create("B", parent_location=a)
        a.parent_location = b
        assert repr(a).startswith("Location(")


class TestLocationRetirement:
    def test_retire_sets_reason_and_date(self) -> None:
        location = Location.create("Clinic A")
        location.retire("  Closed  ", retired_by="admin")

        assert location.retired
        assert location.retire_reason == "Closed"
        assert location.retired_by == "admin"
        assert location.date_retired is not None

    def test_retire_requires_reason(self) -> None:
        location = Location.create("Clinic A")
        with pytest.raises(ValidationError):
            location.retire("   ")
        assert not location.retired

    def test_unretire_clears_retirement(self) -> None:
        location = Location.create("Clinic A")
        location.retire("Closed")
        location.unretire()

        assert not location.retired
        assert location.retire_reason is None
        assert location.date_retired is None


class TestLocationHierarchy:
    def test_set_parent_location_updates_children(self) -> None:
        site = Location.create("Site")
        other_site = Location.create("Other site")
        ward = Location.create("Ward", parent_location=site)

        assert ward.parent_location is site
        assert site.child_locations == [ward]

        ward.set_parent_location(other_site)
        assert site.child_locations == []
        assert other_site.child_locations == [ward]

    def test_ancestors_ordered_from_parent_to_root(self) -> None:
        root = Location.create("Root")
        site = Location.create("Site", parent_location=root)
        ward = Location.create("Ward", parent_location=site)

        assert ward.ancestors() == [site, root]
        assert root.ancestors() == []

    def test_ancestors_terminates_on_cycle(self) -> None:
        a = Location.create("A")
        b = Location.create("B", parent_location=a)
        c = Location.create("C", parent_location=b)
        b.parent_location = c  # loop b -> c -> b above a's child

        assert a.ancestors() == []
        assert c.ancestors() == [b]


class TestLocationAttributes:
    def test_active_attributes_exclude_voided(self) -> None:
        phone = LocationAttributeType.create("Phone", "free_text")
        location = Location.create("Clinic A")
        kept = LocationAttribute.create(phone, "555-0100")
        voided = LocationAttribute.create(phone, "555-0199")
        voided.void("wrong number")
        location.add_attribute(kept)
        location.add_attribute(voided)

        assert location.active_attributes() == [kept]
        assert location.active_attributes_of_type(phone) == [kept]
