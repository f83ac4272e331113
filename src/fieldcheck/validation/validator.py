"""
Error collector used while validating user input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..utils import get_logger
from .errors import ValidationError

logger = get_logger("validation")


@dataclass
class Validator:
    """
    Accumulates named validation failures for a single validation pass.

    ``errors`` maps a field name to the first message recorded for it and
    keeps insertion order. Instances are not safe for concurrent mutation.
    """

    errors: Dict[str, str] = field(default_factory=dict)

    def valid(self) -> bool:
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        # first message recorded for a key wins
        if key in self.errors:
            logger.debug("Ignoring additional error for %s: %s", key, message)
            return
        self.errors[key] = message
        logger.debug("Recorded validation error for %s: %s", key, message)

    def check(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_error(key, message)

    def raise_if_invalid(self) -> None:
        """
        Raise ``ValidationError`` carrying the recorded errors, if any.
        """
        if self.errors:
            raise ValidationError(self.errors)
