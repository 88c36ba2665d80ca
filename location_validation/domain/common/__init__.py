"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- Errors: Accumulator for validation violations
"""

from .entity import Entity, EntityId, new_uuid
from .errors import Errors, FieldError, ObjectError
from .exceptions import (
    DomainError,
    EntityNotFoundError,
    EntityValidationError,
    UnsupportedTypeError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "EntityValidationError",
    "Errors",
    "FieldError",
    "ObjectError",
    "UnsupportedTypeError",
    "ValidationError",
    "ValueObject",
    "new_uuid",
]
