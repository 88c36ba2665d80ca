"""Location module domain exceptions."""

from location_validation.domain.common.exceptions import DomainError


class InvalidCustomValueError(DomainError):
    """Raised by a datatype handler when a serialized attribute value is invalid."""

    def __init__(self, datatype: str, value: str | None, reason: str) -> None:
        super().__init__(
            f"Invalid value for datatype {datatype}: {reason}",
            {"datatype": datatype, "value": value},
        )
        self.datatype = datatype
        self.value = value


class UnknownDatatypeError(DomainError):
    """Raised when an attribute type names a datatype that is not registered."""

    def __init__(self, datatype: str) -> None:
        super().__init__(f"No datatype handler registered for {datatype!r}", {"datatype": datatype})
        self.datatype = datatype
