"""Save location use case."""

import structlog

from location_validation.application.common.result import Failure, Result, Success
from location_validation.application.location.protocols.location_repository import (
    LocationRepositoryProtocol,
)
from location_validation.application.location.services.validation_service import (
    ValidationService,
)
from location_validation.domain.common.errors import Errors
from location_validation.domain.location.entities.location import Location

logger = structlog.get_logger(__name__)


class SaveLocationUseCase:
    """Use case for validating and persisting locations."""

    def __init__(
        self,
        location_repository: LocationRepositoryProtocol,
        validation_service: ValidationService,
    ) -> None:
        self.location_repository = location_repository
        self.validation_service = validation_service

    def save(self, location: Location | None) -> Result[Location, Errors]:
        """
        Validate a location and persist it if it is valid.

        Args:
            location: The candidate location

        Returns:
            Success with the saved location, or Failure with the violations.
            On failure the candidate may have had ``retired`` reset to False.
        """
        errors = self.validation_service.validate(location, for_type=Location)
        if errors.has_errors() or location is None:
            return Failure(errors)

        saved = self.location_repository.save(location)
        logger.info("location_saved", location_id=saved.id.value, location_uuid=saved.uuid)
        return Success(saved)
