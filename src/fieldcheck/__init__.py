"""
fieldcheck public package initialization.

Exposes the error collector and the predicate helpers used to validate
user input fields.
"""

from .config import ConfigurationError, ValidationSettings  # noqa: F401
from .validation import (  # noqa: F401
    EMAIL_RX,
    ValidationError,
    Validator,
    matches,
    permitted_value,
    unique,
)

__all__ = [
    "Validator",
    "ValidationError",
    "EMAIL_RX",
    "matches",
    "permitted_value",
    "unique",
    "ValidationSettings",
    "ConfigurationError",
]
