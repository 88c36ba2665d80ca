"""Protocol implemented by every entity validator."""

from typing import Protocol

from location_validation.domain.common.errors import Errors


class Validator(Protocol):
    """
    A validator checks one kind of object and reports into an Errors sink.

    Validators must not raise for business-rule violations.
    """

    def supports(self, cls: type) -> bool:
        """Check whether this validator handles objects of ``cls``."""
        ...

    def validate(self, obj: object, errors: Errors) -> None:
        """Append every violation found on ``obj`` to ``errors``."""
        ...
