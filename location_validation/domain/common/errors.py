"""
Violation accumulator shared by all validators.

Validators never raise for business-rule violations. They append a
machine-readable error code to an ``Errors`` instance, either bound to a field
(``reject_value``) or to the object as a whole (``reject``), and the caller
decides what to do with the complete list once validation has finished.

Example:
    errors = Errors("location")
    validator.validate(location, errors)
    if errors.has_field_errors("name"):
        ...
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .value_object import ValueObject


@dataclass(frozen=True)
class ObjectError(ValueObject):
    """A violation that concerns the validated object as a whole."""

    object_name: str
    code: str
    arguments: tuple[object, ...] = ()


@dataclass(frozen=True)
class FieldError(ValueObject):
    """A violation bound to one field of the validated object."""

    object_name: str
    field: str
    code: str
    arguments: tuple[object, ...] = ()


class Errors:
    """Ordered collection of the violations found for one validated object."""

    def __init__(self, object_name: str) -> None:
        self.object_name = object_name
        self._errors: list[ObjectError | FieldError] = []

    def reject_value(
        self, field: str, code: str, arguments: Sequence[object] | None = None
    ) -> None:
        """Register a violation for ``field``."""
        self._errors.append(
            FieldError(
                object_name=self.object_name,
                field=field,
                code=code,
                arguments=tuple(arguments or ()),
            )
        )

    def reject(self, code: str, arguments: Sequence[object] | None = None) -> None:
        """Register a violation for the object as a whole."""
        self._errors.append(
            ObjectError(object_name=self.object_name, code=code, arguments=tuple(arguments or ()))
        )

    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    @property
    def all_errors(self) -> list[ObjectError | FieldError]:
        """All violations in the order they were registered."""
        return list(self._errors)

    @property
    def global_errors(self) -> list[ObjectError]:
        return [error for error in self._errors if isinstance(error, ObjectError)]

    def has_global_errors(self) -> bool:
        return bool(self.global_errors)

    def field_errors(self, field: str | None = None) -> list[FieldError]:
        """Field violations, optionally restricted to a single field."""
        return [
            error
            for error in self._errors
            if isinstance(error, FieldError) and (field is None or error.field == field)
        ]

    def has_field_errors(self, field: str | None = None) -> bool:
        return bool(self.field_errors(field))

    def codes(self, field: str | None = None) -> list[str]:
        """
        Error codes registered so far.

        Args:
            field: Restrict to one field. When omitted, codes of every
                violation (field and global) are returned.
        """
        if field is None:
            return [error.code for error in self._errors]
        return [error.code for error in self.field_errors(field)]

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"Errors(object_name={self.object_name!r}, errors={self._errors!r})"
