"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Location, LocationAttributeType, LocationAttribute
- Value Objects: identifiers and validation violations
- Domain Services: attribute datatype validation
"""
