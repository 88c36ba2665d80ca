"""Location domain services."""

from .attribute_validator import Customizable, CustomizableAttributeValidator

__all__ = [
    "Customizable",
    "CustomizableAttributeValidator",
]
