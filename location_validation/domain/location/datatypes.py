"""
Datatype handlers for customizable attribute values.

Attribute values are stored serialized as text. Each attribute type names a
datatype key; the handler registered under that key decides whether a
serialized value is acceptable, optionally using the attribute type's
``datatype_config`` (a regular expression, a list of options, ...).
"""

import re
from datetime import date

from location_validation.domain.location.exceptions import (
    InvalidCustomValueError,
    UnknownDatatypeError,
)

FREE_TEXT = "free_text"
LONG_FREE_TEXT = "long_free_text"
BOOLEAN = "boolean"
INTEGER = "integer"
FLOAT = "float"
DATE = "date"
REGEX_VALIDATED_TEXT = "regex_validated_text"
SPECIFIED_TEXT_OPTIONS = "specified_text_options"

MAX_FREE_TEXT_LENGTH = 255


class CustomDatatype:
    """Base handler. Subclasses override ``validate_value``."""

    key: str = ""

    def validate(self, value_reference: str | None, config: str | None = None) -> None:
        """
        Check a serialized value.

        Args:
            value_reference: The serialized value
            config: The attribute type's datatype_config

        Raises:
            InvalidCustomValueError: If the value is not acceptable
        """
        if value_reference is None or value_reference == "":
            raise self._fail(value_reference, "value is empty")
        self.validate_value(value_reference, config)

    def validate_value(self, value: str, config: str | None) -> None:
        """Datatype specific check of a non-empty value."""

    def _fail(self, value_reference: str | None, reason: str) -> InvalidCustomValueError:
        return InvalidCustomValueError(self.key, value_reference, reason)


class FreeTextDatatype(CustomDatatype):
    key = FREE_TEXT
    max_length: int | None = MAX_FREE_TEXT_LENGTH

    def validate_value(self, value: str, config: str | None) -> None:
        if self.max_length is not None and len(value) > self.max_length:
            raise self._fail(value, f"longer than {self.max_length} characters")


class LongFreeTextDatatype(FreeTextDatatype):
    key = LONG_FREE_TEXT
    max_length = None


class BooleanDatatype(CustomDatatype):
    key = BOOLEAN

    def validate_value(self, value: str, config: str | None) -> None:
        if value not in ("true", "false"):
            raise self._fail(value, "expected 'true' or 'false'")


class IntegerDatatype(CustomDatatype):
    key = INTEGER

    def validate_value(self, value: str, config: str | None) -> None:
        try:
            int(value)
        except ValueError as e:
            raise self._fail(value, "not an integer") from e


class FloatDatatype(CustomDatatype):
    key = FLOAT

    def validate_value(self, value: str, config: str | None) -> None:
        try:
            float(value)
        except ValueError as e:
            raise self._fail(value, "not a number") from e


class DateDatatype(CustomDatatype):
    key = DATE

    def validate_value(self, value: str, config: str | None) -> None:
        try:
            date.fromisoformat(value)
        except ValueError as e:
            raise self._fail(value, "not an ISO date (YYYY-MM-DD)") from e


class RegexValidatedTextDatatype(CustomDatatype):
    """Text that must fully match the regular expression given as config."""

    key = REGEX_VALIDATED_TEXT

    def validate_value(self, value: str, config: str | None) -> None:
        if not config:
            raise self._fail(value, "no regular expression configured")
        try:
            matched = re.fullmatch(config, value)
        except re.error as e:
            raise self._fail(value, f"invalid regular expression {config}") from e
        if matched is None:
            raise self._fail(value, f"does not match {config}")


class SpecifiedTextOptionsDatatype(CustomDatatype):
    """Text restricted to the comma separated options given as config."""

    key = SPECIFIED_TEXT_OPTIONS

    def validate_value(self, value: str, config: str | None) -> None:
        options = [option.strip() for option in (config or "").split(",") if option.strip()]
        if value not in options:
            raise self._fail(value, f"not one of {options}")


class DatatypeRegistry:
    """Maps datatype keys to their handlers."""

    def __init__(self, handlers: list[CustomDatatype] | None = None) -> None:
        self._handlers: dict[str, CustomDatatype] = {}
        for handler in handlers or []:
            self.register(handler.key, handler)

    def register(self, key: str, handler: CustomDatatype) -> None:
        self._handlers[key] = handler

    def get(self, key: str) -> CustomDatatype:
        """
        Get the handler for a datatype key.

        Raises:
            UnknownDatatypeError: If nothing is registered under ``key``
        """
        handler = self._handlers.get(key)
        if handler is None:
            raise UnknownDatatypeError(key)
        return handler

    def keys(self) -> list[str]:
        return sorted(self._handlers)


def default_registry() -> DatatypeRegistry:
    """Registry with the standard datatypes."""
    return DatatypeRegistry(
        [
            FreeTextDatatype(),
            LongFreeTextDatatype(),
            BooleanDatatype(),
            IntegerDatatype(),
            FloatDatatype(),
            DateDatatype(),
            RegexValidatedTextDatatype(),
            SpecifiedTextOptionsDatatype(),
        ]
    )
