"""
Application common module.

Contains base classes for application layer:
- Validator: Protocol implemented by entity validators
- Result: Result type for use case outcomes
"""

from .result import Failure, Result, Success
from .validator import Validator

__all__ = [
    "Failure",
    "Result",
    "Success",
    "Validator",
]
