from .location_validator import LocationValidator
from .validation_service import ValidationService

__all__ = [
    "LocationValidator",
    "ValidationService",
]
