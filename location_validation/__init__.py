"""
location-validation: validation of hierarchical locations before they are saved.

Checks required fields, the retired/retire-reason rule, uniqueness of active
names, cycles in the parent hierarchy, and customizable attributes.
"""

from location_validation.application.location.services.location_validator import (
    LocationValidator,
)
from location_validation.application.location.services.validation_service import (
    ValidationService,
)
from location_validation.domain.common.errors import Errors, FieldError, ObjectError
from location_validation.domain.location.entities import (
    Location,
    LocationAttribute,
    LocationAttributeType,
)
from location_validation.domain.location.services.attribute_validator import (
    CustomizableAttributeValidator,
)

__version__ = "0.1.0"

__all__ = [
    "CustomizableAttributeValidator",
    "Errors",
    "FieldError",
    "Location",
    "LocationAttribute",
    "LocationAttributeType",
    "LocationValidator",
    "ObjectError",
    "ValidationService",
]
