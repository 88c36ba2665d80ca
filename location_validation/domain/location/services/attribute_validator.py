"""
Domain service validating customizable attributes.

This is a pure domain service with no infrastructure dependencies.
"""

from collections.abc import Sequence
from typing import Protocol

from location_validation.domain.common.errors import Errors
from location_validation.domain.location import error_codes
from location_validation.domain.location.datatypes import DatatypeRegistry, default_registry
from location_validation.domain.location.entities.location_attribute import LocationAttribute
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)
from location_validation.domain.location.exceptions import (
    InvalidCustomValueError,
    UnknownDatatypeError,
)


class Customizable(Protocol):
    """Anything carrying customizable attributes."""

    def active_attributes(self) -> list[LocationAttribute]: ...


class CustomizableAttributeValidator:
    """
    Validates the active attributes of an owner against their attribute types.

    Two kinds of checks are made:
    - every active attribute value must be accepted by its datatype handler
    - every supplied attribute type with occurrence limits must be present
      between min_occurs and max_occurs times
    """

    def __init__(self, datatypes: DatatypeRegistry | None = None) -> None:
        self.datatypes = datatypes or default_registry()

    def validate_attributes(
        self,
        owner: Customizable | None,
        attribute_types: Sequence[LocationAttributeType],
        errors: Errors,
    ) -> None:
        """
        Append attribute violations for ``owner`` to ``errors``.

        Args:
            owner: The entity whose attributes are checked (None is ignored)
            attribute_types: Every known attribute type, in registry order
            errors: Violation accumulator
        """
        if owner is None:
            return

        active = owner.active_attributes()

        for attribute in active:
            attribute_type = attribute.attribute_type
            try:
                self.datatypes.get(attribute_type.datatype).validate(
                    attribute.value_reference, attribute_type.datatype_config
                )
            except (InvalidCustomValueError, UnknownDatatypeError):
                errors.reject_value(
                    error_codes.ACTIVE_ATTRIBUTES_FIELD,
                    error_codes.ATTRIBUTE_INVALID,
                    [attribute_type.name, attribute.value_reference],
                )

        for attribute_type in attribute_types:
            if not attribute_type.has_occurrence_limits():
                continue
            count = sum(1 for attribute in active if attribute.attribute_type == attribute_type)
            if count < attribute_type.min_occurs:
                errors.reject(error_codes.ATTRIBUTE_REQUIRED, [attribute_type.name])
            if attribute_type.max_occurs is not None and count > attribute_type.max_occurs:
                errors.reject(
                    error_codes.ATTRIBUTE_MAX_OCCURS,
                    [attribute_type.name, attribute_type.max_occurs],
                )
