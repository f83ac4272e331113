"""
Validation utilities exposed at the package level.
"""

from .errors import ValidationError
from .predicates import EMAIL_RX, matches, permitted_value, unique
from .validator import Validator

__all__ = [
    "EMAIL_RX",
    "ValidationError",
    "Validator",
    "matches",
    "permitted_value",
    "unique",
]
