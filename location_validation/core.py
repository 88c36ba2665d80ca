from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from location_validation.application.location.services.location_validator import (
    LocationValidator,
)
from location_validation.application.location.services.validation_service import (
    ValidationService,
)
from location_validation.application.location.use_cases.save_location_use_case import (
    SaveLocationUseCase,
)
from location_validation.config import Settings, configure_logging, get_settings
from location_validation.database import create_db_engine, create_session_factory
from location_validation.domain.location.datatypes import default_registry
from location_validation.domain.location.services.attribute_validator import (
    CustomizableAttributeValidator,
)
from location_validation.infrastructure.location.repositories import (
    LocationAttributeTypeRepository,
    LocationRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Database
    engine = providers.Singleton(create_db_engine, settings=settings)
    session_factory = providers.Singleton(create_session_factory, engine=engine)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    location_repository = providers.Factory(
        LocationRepository,
        db=db,
        name_match=settings.provided.LOCATION_NAME_MATCH,
    )
    location_attribute_type_repository = providers.Factory(
        LocationAttributeTypeRepository, db=db
    )

    # Domain services (pure domain logic, no db)
    datatype_registry = providers.Singleton(default_registry)
    attribute_validator = providers.Factory(
        CustomizableAttributeValidator, datatypes=datatype_registry
    )

    # Validation
    location_validator = providers.Factory(
        LocationValidator,
        location_lookup=location_repository,
        attribute_type_registry=location_attribute_type_repository,
        attribute_validator=attribute_validator,
    )
    validation_service = providers.Factory(
        ValidationService,
        validators=providers.List(location_validator),
    )

    # Use cases
    save_location_use_case = providers.Factory(
        SaveLocationUseCase,
        location_repository=location_repository,
        validation_service=validation_service,
    )


container = Container()


def init_app(settings: Settings | None = None) -> Container:
    """Configure logging and settings once at startup and return the container."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    container.settings.override(settings)
    return container
