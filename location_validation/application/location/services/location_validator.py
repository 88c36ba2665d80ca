"""Application service validating a Location before it is persisted."""

import structlog

from location_validation.application.location.protocols.attribute_type_registry import (
    LocationAttributeTypeRegistryProtocol,
)
from location_validation.application.location.protocols.attribute_validator import (
    CustomizableAttributeValidatorProtocol,
)
from location_validation.application.location.protocols.location_repository import (
    LocationLookupProtocol,
)
from location_validation.domain.common.errors import Errors
from location_validation.domain.common.exceptions import UnsupportedTypeError
from location_validation.domain.location import error_codes
from location_validation.domain.location.entities.location import Location

logger = structlog.get_logger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class LocationValidator:
    """
    Validates Location objects.

    Checks, in order and without stopping at the first failure:
    1. name is present and retired locations carry a retire reason
    2. no other non-retired location uses the same name
    3. the parent chain does not loop back onto the location
    4. custom attributes, delegated to the customizable attribute validator
    """

    def __init__(
        self,
        location_lookup: LocationLookupProtocol,
        attribute_type_registry: LocationAttributeTypeRegistryProtocol,
        attribute_validator: CustomizableAttributeValidatorProtocol,
    ) -> None:
        self.location_lookup = location_lookup
        self.attribute_type_registry = attribute_type_registry
        self.attribute_validator = attribute_validator

    def supports(self, cls: type) -> bool:
        return issubclass(cls, Location)

    def validate(self, obj: object, errors: Errors) -> None:
        """
        Append every rule violation of ``obj`` to ``errors``.

        A missing location is reported once under the ``location`` field and
        nothing else is checked.

        Post-condition: a location flagged ``retired`` without a retire reason
        comes back with ``retired`` set to False, so that a re-displayed form
        does not show it as retired with no reason. The violation is reported
        all the same.

        Raises:
            UnsupportedTypeError: If ``obj`` is neither None nor a Location
        """
        if obj is None:
            errors.reject_value(error_codes.LOCATION_FIELD, error_codes.GENERAL)
            return
        if not isinstance(obj, Location):
            raise UnsupportedTypeError(self.__class__.__name__, type(obj))

        location = obj
        self._check_required_fields(location, errors)
        self._check_unique_name(location, errors)
        self._check_parent_cycle(location, errors)
        self.attribute_validator.validate_attributes(
            location,
            self.attribute_type_registry.list_all_location_attribute_types(),
            errors,
        )

        logger.debug(
            "location_validation_completed",
            location_uuid=location.uuid,
            error_count=errors.error_count,
        )

    def _check_required_fields(self, location: Location, errors: Errors) -> None:
        if _is_blank(location.name):
            errors.reject_value(error_codes.NAME_FIELD, error_codes.NAME_REQUIRED)

        if location.retired and _is_blank(location.retire_reason):
            location.retired = False
            errors.reject_value(
                error_codes.RETIRE_REASON_FIELD, error_codes.RETIRE_REASON_REQUIRED
            )
            logger.debug("location_retired_flag_reset", location_uuid=location.uuid)

    def _check_unique_name(self, location: Location, errors: Errors) -> None:
        existing = self.location_lookup.find_by_name(location.name)
        if existing is not None and not existing.retired and existing.uuid != location.uuid:
            errors.reject_value(error_codes.NAME_FIELD, error_codes.DUPLICATE_NAME)

    def _check_parent_cycle(self, location: Location, errors: Errors) -> None:
        # ancestors() stops before revisiting any node, so the walk got back to
        # the origin only if the last ancestor points at it. A loop higher up
        # is not reported.
        ancestors = location.ancestors()
        tail = ancestors[-1] if ancestors else location
        if tail.parent_location is location or any(a == location for a in ancestors):
            errors.reject_value(
                error_codes.PARENT_LOCATION_FIELD, error_codes.PARENT_LOCATION_CYCLE
            )
            logger.debug("location_parent_cycle_detected", location_uuid=location.uuid)
