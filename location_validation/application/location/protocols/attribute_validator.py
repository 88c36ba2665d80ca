from collections.abc import Sequence
from typing import Protocol

from location_validation.domain.common.errors import Errors
from location_validation.domain.location.entities.location_attribute_type import (
    LocationAttributeType,
)
from location_validation.domain.location.services.attribute_validator import Customizable


class CustomizableAttributeValidatorProtocol(Protocol):
    def validate_attributes(
        self,
        owner: Customizable | None,
        attribute_types: Sequence[LocationAttributeType],
        errors: Errors,
    ) -> None: ...
