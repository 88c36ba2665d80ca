"""Tests for CustomizableAttributeValidator domain service."""

from location_validation.domain.common.errors import Errors
from location_validation.domain.location.entities.location import Location
from location_validation.domain.location.entities.location_attribute import LocationAttribute
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)
from location_validation.domain.location.services.attribute_validator import (
    CustomizableAttributeValidator,
)


def _location_with(*attributes: LocationAttribute) -> Location:
    location = Location.create("Clinic A")
    for attribute in attributes:
        location.add_attribute(attribute)
    return location


class TestCustomizableAttributeValidator:
    def test_no_owner_is_ignored(self) -> None:
        errors = Errors("location")
        phone = LocationAttributeType.create("Phone", "free_text", min_occurs=1)
        CustomizableAttributeValidator().validate_attributes(None, [phone], errors)
        assert not errors.has_errors()

    def test_valid_attributes_pass(self) -> None:
        beds = LocationAttributeType.create("Beds", "integer", min_occurs=1, max_occurs=1)
        location = _location_with(LocationAttribute.create(beds, "12"))
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(location, [beds], errors)

        assert not errors.has_errors()

    def test_invalid_value_is_reported_on_active_attributes(self) -> None:
        beds = LocationAttributeType.create("Beds", "integer")
        location = _location_with(LocationAttribute.create(beds, "twelve"))
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(location, [beds], errors)

        [error] = errors.field_errors("activeAttributes")
        assert error.code == "attribute.error.invalid"
        assert error.arguments == ("Beds", "twelve")

    def test_malformed_regex_config_is_reported_as_invalid(self) -> None:
        code = LocationAttributeType.create("Code", "regex_validated_text", datatype_config="[A-Z")
        location = _location_with(LocationAttribute.create(code, "ABC"))
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(location, [code], errors)

        [error] = errors.field_errors("activeAttributes")
        assert error.code == "attribute.error.invalid"
        assert error.arguments == ("Code", "ABC")

    def test_unknown_datatype_is_reported_as_invalid(self) -> None:
        coded = LocationAttributeType.create("Region", "coded")
        location = _location_with(LocationAttribute.create(coded, "North"))
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(location, [coded], errors)

        assert errors.codes("activeAttributes") == ["attribute.error.invalid"]

    def test_missing_required_attribute(self) -> None:
        phone = LocationAttributeType.create("Phone", "free_text", min_occurs=1)
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(_location_with(), [phone], errors)

        [error] = errors.global_errors
        assert error.code == "error.required"
        assert error.arguments == ("Phone",)

    def test_voided_attribute_does_not_count(self) -> None:
        phone = LocationAttributeType.create("Phone", "free_text", min_occurs=1)
        attribute = LocationAttribute.create(phone, "not-a-number-but-fine")
        attribute.void("moved")
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(
            _location_with(attribute), [phone], errors
        )

        assert errors.codes() == ["error.required"]

    def test_too_many_occurrences(self) -> None:
        phone = LocationAttributeType.create("Phone", "free_text", max_occurs=1)
        location = _location_with(
            LocationAttribute.create(phone, "555-0100"),
            LocationAttribute.create(phone, "555-0101"),
        )
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(location, [phone], errors)

        [error] = errors.global_errors
        assert error.code == "attribute.error.maxOccurs"
        assert error.arguments == ("Phone", 1)

    def test_types_without_limits_are_not_counted(self) -> None:
        notes = LocationAttributeType.create("Notes", "long_free_text")
        errors = Errors("location")

        CustomizableAttributeValidator().validate_attributes(_location_with(), [notes], errors)

        assert not errors.has_errors()
