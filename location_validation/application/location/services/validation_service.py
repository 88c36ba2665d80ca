"""Application service dispatching objects to the validators that support them."""

import structlog

from location_validation.application.common.validator import Validator
from location_validation.domain.common.errors import Errors
from location_validation.domain.common.exceptions import EntityValidationError

logger = structlog.get_logger(__name__)


def _object_name(cls: type) -> str:
    name = cls.__name__
    return name[:1].lower() + name[1:]


class ValidationService:
    """
    Runs every registered validator that supports the object's type.

    Validators run in registration order and share one Errors instance, so the
    caller gets the complete list of violations in a single report.
    """

    def __init__(self, validators: list[Validator]) -> None:
        self.validators = list(validators)

    def register(self, validator: Validator) -> None:
        self.validators.append(validator)

    def validators_for(self, cls: type) -> list[Validator]:
        return [validator for validator in self.validators if validator.supports(cls)]

    def validate(self, obj: object, for_type: type | None = None) -> Errors:
        """
        Validate ``obj`` and return every violation found.

        Args:
            obj: The object to validate. May be None when ``for_type`` is given.
            for_type: Type used to pick validators; defaults to ``type(obj)``

        Raises:
            ValueError: If obj is None and no for_type is given
        """
        if for_type is None:
            if obj is None:
                raise ValueError("for_type is required to validate a missing object")
            for_type = type(obj)

        errors = Errors(_object_name(for_type))
        validators = self.validators_for(for_type)
        if not validators:
            logger.warning("no_validator_registered", object_type=for_type.__name__)

        for validator in validators:
            validator.validate(obj, errors)

        if errors.has_errors():
            logger.info(
                "validation_failed",
                object_type=for_type.__name__,
                codes=errors.codes(),
            )
        return errors

    def ensure_valid(self, obj: object, for_type: type | None = None) -> None:
        """
        Validate ``obj`` and raise if anything was reported.

        Raises:
            EntityValidationError: Carrying the Errors report
        """
        errors = self.validate(obj, for_type)
        if errors.has_errors():
            raise EntityValidationError(errors)
