"""
Result type for use case outcomes.

The Result type provides a way to handle success and failure cases
explicitly, without relying on exceptions for control flow.

Example:
    result = save_location_use_case.save(location)
    if result.is_success:
        print(f"Saved: {result.unwrap().uuid}")
    else:
        print(f"Rejected: {result.unwrap_error().codes()}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        """Raises ValueError - Success has no error."""
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError("Cannot get value from Failure result")

    def unwrap_error(self) -> E:
        return self.error


# Type alias for Result - a union of Success and Failure
Result = Success[T] | Failure[E]
