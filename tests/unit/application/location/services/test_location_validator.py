"""Tests for LocationValidator application service."""

from collections.abc import Sequence

import pytest

from location_validation.application.location.services.location_validator import (
    LocationValidator,
)
from location_validation.domain.common.errors import Errors
from location_validation.domain.common.exceptions import UnsupportedTypeError
from location_validation.domain.location.entities.location import Location
from location_validation.domain.location.entities.location_attribute import LocationAttribute
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)
from location_validation.domain.location.services.attribute_validator import (
    Customizable,
    CustomizableAttributeValidator,
)


class FakeLocationLookup:
    def __init__(self, *locations: Location) -> None:
        self.locations = list(locations)
        self.queried: list[str | None] = []

    def find_by_name(self, name: str | None) -> Location | None:
        self.queried.append(name)
        if not name:
            return None
        return next((loc for loc in self.locations if loc.name == name), None)


class FakeAttributeTypeRegistry:
    def __init__(self, *attribute_types: LocationAttributeType) -> None:
        self.attribute_types = list(attribute_types)

    def list_all_location_attribute_types(self) -> list[LocationAttributeType]:
        return list(self.attribute_types)


class RecordingAttributeValidator:
    def __init__(self, code: str | None = None) -> None:
        self.code = code
        self.calls: list[tuple[Customizable | None, list[LocationAttributeType]]] = []

    def validate_attributes(
        self,
        owner: Customizable | None,
        attribute_types: Sequence[LocationAttributeType],
        errors: Errors,
    ) -> None:
        self.calls.append((owner, list(attribute_types)))
        if self.code:
            errors.reject_value("activeAttributes", self.code)


def _validate(
    location: object,
    lookup: FakeLocationLookup | None = None,
    attribute_validator: RecordingAttributeValidator | None = None,
) -> Errors:
    validator = LocationValidator(
        location_lookup=lookup or FakeLocationLookup(),
        attribute_type_registry=FakeAttributeTypeRegistry(),
        attribute_validator=attribute_validator or RecordingAttributeValidator(),
    )
    errors = Errors("location")
    validator.validate(location, errors)
    return errors


class TestLocationValidatorSupports:
    def test_supports_location(self) -> None:
        validator = LocationValidator(
            FakeLocationLookup(), FakeAttributeTypeRegistry(), RecordingAttributeValidator()
        )
        assert validator.supports(Location)
        assert not validator.supports(LocationAttributeType)

    def test_rejects_unsupported_object(self) -> None:
        with pytest.raises(UnsupportedTypeError):
            _validate("Clinic A")


class TestMissingLocation:
    def test_none_is_reported_once_and_nothing_else_runs(self) -> None:
        lookup = FakeLocationLookup()
        attribute_validator = RecordingAttributeValidator()

        errors = _validate(None, lookup, attribute_validator)

        assert errors.codes() == ["error.general"]
        assert errors.field_errors("location")[0].code == "error.general"
        assert lookup.queried == []
        assert attribute_validator.calls == []


class TestRequiredFields:
    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_blank_name_fails(self, name: str | None) -> None:
        errors = _validate(Location.create(name))
        assert errors.codes("name") == ["error.name"]

    def test_blank_name_still_queries_lookup_without_failing(self) -> None:
        lookup = FakeLocationLookup(Location.create("Clinic A"))
        errors = _validate(Location.create(""), lookup)
        assert lookup.queried == [""]
        assert errors.codes() == ["error.name"]

    @pytest.mark.parametrize("reason", [None, "", "   "])
    def test_retired_without_reason_fails_and_resets_retired(self, reason: str | None) -> None:
        location = Location.create("Clinic A")
        location.retired = True
        location.retire_reason = reason

        errors = _validate(location)

        assert errors.codes("retireReason") == ["error.null"]
        assert location.retired is False

    def test_retired_with_reason_passes(self) -> None:
        location = Location.create("Clinic A")
        location.retire("Merged into Clinic B")

        errors = _validate(location)

        assert not errors.has_errors()
        assert location.retired is True

    def test_reset_happens_alongside_other_failures(self) -> None:
        location = Location.create("")
        location.retired = True

        errors = _validate(location)

        assert errors.codes() == ["error.name", "error.null"]
        assert location.retired is False


class TestUniqueName:
    def test_duplicate_active_name_fails(self) -> None:
        existing = Location.create("Clinic A")
        errors = _validate(Location.create("Clinic A"), FakeLocationLookup(existing))
        assert errors.codes("name") == ["location.duplicate.name"]

    def test_same_location_is_not_a_duplicate(self) -> None:
        location = Location.create("Clinic A")
        errors = _validate(location, FakeLocationLookup(location))
        assert not errors.has_errors()

    def test_separately_loaded_copy_is_not_a_duplicate(self) -> None:
        location = Location.create("Clinic A")
        stored = Location.create_with_id(id=location.id, uuid=location.uuid, name="Clinic A")
        errors = _validate(location, FakeLocationLookup(stored))
        assert not errors.has_errors()

    def test_retired_location_may_share_name(self) -> None:
        existing = Location.create("Clinic A")
        existing.retire("Moved")
        errors = _validate(Location.create("Clinic A"), FakeLocationLookup(existing))
        assert not errors.has_errors()

    def test_different_name_passes(self) -> None:
        existing = Location.create("Clinic B")
        errors = _validate(Location.create("Clinic A"), FakeLocationLookup(existing))
        assert not errors.has_errors()


class TestParentCycle:
    def test_root_without_parent_passes(self) -> None:
        errors = _validate(Location.create("Root"))
        assert not errors.has_field_errors("parentLocation")

    def test_acyclic_chain_passes(self) -> None:
        root = Location.create("Root")
        site = Location.create("Site", parent_location=root)
        ward = Location.create("Ward", parent_location=site)

        errors = _validate(ward)

        assert not errors.has_errors()

    def test_self_parent_fails(self) -> None:
        location = Location.create("Loop")
        location.parent_location = location

        errors = _validate(location)

        assert errors.codes("parentLocation") == ["Location.parentLocation.error"]

    def test_chain_returning_to_origin_fails(self) -> None:
        location = Location.create("L")
        p1 = Location.create("P1")
        p2 = Location.create("P2")
        location.parent_location = p1
        p1.parent_location = p2
        p2.parent_location = location

        errors = _validate(location)

        assert errors.codes() == ["Location.parentLocation.error"]

    def test_loop_through_copy_of_origin_fails(self) -> None:
        location = Location.create("L")
        parent = Location.create("P")
        location.parent_location = parent
        parent.parent_location = Location.create_with_id(
            id=location.id, uuid=location.uuid, name="L"
        )

        errors = _validate(location)

        assert errors.codes("parentLocation") == ["Location.parentLocation.error"]

    def test_cycle_above_origin_terminates_without_error(self) -> None:
        location = Location.create("L")
        a = Location.create("A")
        b = Location.create("B")
        location.parent_location = a
        a.parent_location = b
        b.parent_location = a

        errors = _validate(location)

        assert not errors.has_field_errors("parentLocation")


class TestAttributeDelegation:
    def test_delegates_with_all_attribute_types(self) -> None:
        phone = LocationAttributeType.create("Phone", "free_text")
        retired_type = LocationAttributeType.create("Fax", "free_text")
        retired_type.retired = True
        attribute_validator = RecordingAttributeValidator()
        validator = LocationValidator(
            FakeLocationLookup(),
            FakeAttributeTypeRegistry(phone, retired_type),
            attribute_validator,
        )
        location = Location.create("Clinic A")

        validator.validate(location, Errors("location"))

        assert attribute_validator.calls == [(location, [phone, retired_type])]

    def test_delegation_runs_after_other_failures(self) -> None:
        attribute_validator = RecordingAttributeValidator(code="attribute.error.invalid")
        location = Location.create("")
        location.parent_location = location

        errors = _validate(location, attribute_validator=attribute_validator)

        assert errors.codes() == [
            "error.name",
            "Location.parentLocation.error",
            "attribute.error.invalid",
        ]

    def test_attribute_violations_reach_the_same_errors(self) -> None:
        phone = LocationAttributeType.create("Phone", "free_text", min_occurs=1)
        validator = LocationValidator(
            FakeLocationLookup(),
            FakeAttributeTypeRegistry(phone),
            CustomizableAttributeValidator(),
        )
        location = Location.create("Clinic A")
        location.add_attribute(LocationAttribute.create(phone, ""))
        errors = Errors("location")

        validator.validate(location, errors)

        assert errors.codes() == ["attribute.error.invalid"]


class TestEndToEnd:
    def test_empty_name(self) -> None:
        assert _validate(Location.create("")).codes() == ["error.name"]

    def test_retired_without_reason(self) -> None:
        location = Location.create("Clinic A")
        location.retired = True
        location.retire_reason = ""

        assert _validate(location).codes() == ["error.null"]
        assert not location.retired

    def test_duplicate_name(self) -> None:
        existing = Location.create("Clinic A")
        errors = _validate(Location.create("Clinic A"), FakeLocationLookup(existing))
        assert errors.codes() == ["location.duplicate.name"]

    def test_compliant_location_is_valid_twice(self) -> None:
        root = Location.create("Root")
        location = Location.create("Clinic A", parent_location=root)
        lookup = FakeLocationLookup(root, location)

        assert not _validate(location, lookup).has_errors()
        assert not _validate(location, lookup).has_errors()
