"""
Domain layer exceptions.

These exceptions represent programming faults and broken construction-time
invariants. Business-rule violations found while validating a candidate
entity are not raised: they are reported through an ``Errors`` accumulator.
"""

from .errors import Errors


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when a value object or entity is constructed with invalid data.

    Example: An attribute type whose max_occurs is lower than its min_occurs.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Saving a location whose parent id no longer exists.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class UnsupportedTypeError(DomainError):
    """Raised when a validator is handed an object it does not support."""

    def __init__(self, validator: str, received: type) -> None:
        message = f"{validator} cannot validate objects of type {received.__name__}"
        super().__init__(message, {"validator": validator, "received": received.__name__})
        self.received = received


class EntityValidationError(DomainError):
    """
    Raised by callers that want an exception instead of an Errors report.

    Validators themselves never raise it; ValidationService.ensure_valid does.
    """

    def __init__(self, errors: Errors) -> None:
        super().__init__(
            f"{errors.object_name} failed validation with {errors.error_count} error(s)",
            {"codes": errors.codes()},
        )
        self.errors = errors
