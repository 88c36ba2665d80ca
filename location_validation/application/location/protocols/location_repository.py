"""Protocols for Location repositories."""

from typing import Protocol

from location_validation.domain.location.entities.location import Location


class LocationLookupProtocol(Protocol):
    """Read access needed to check name uniqueness."""

    def find_by_name(self, name: str | None) -> Location | None:
        """
        Find a location by name.

        Case and whitespace semantics of the match belong to the implementation.
        A blank or missing name matches nothing.

        Args:
            name: The location name

        Returns:
            The matching location (retired or not) or None
        """
        ...


class LocationRepositoryProtocol(LocationLookupProtocol, Protocol):
    """Protocol for Location repository operations."""

    def find_by_uuid(self, uuid: str) -> Location | None: ...

    def save(self, location: Location) -> Location:
        """
        Persist a location and its attributes.

        Returns:
            The saved location with its database id assigned
        """
        ...
