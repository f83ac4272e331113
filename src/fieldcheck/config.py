"""
Runtime settings for fieldcheck.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .utils.logging import ROOT_LOGGER_NAME, configure_logging

DEFAULT_LEVEL_ENV = "FIELDCHECK_LOG_LEVEL"

_LEVEL_NAMES = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class ConfigurationError(ValueError):
    """Raised when a settings value cannot be interpreted."""


def _parse_level(value: str, *, key: str) -> int:
    normalized = value.strip().lower()
    if normalized in _LEVEL_NAMES:
        return _LEVEL_NAMES[normalized]
    try:
        return int(normalized)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid log level for '{key}': {value!r}") from exc


@dataclass
class ValidationSettings:
    """
    Settings controlling how fieldcheck reports what it does.
    """

    log_level: int = logging.INFO
    source: str | None = None

    @classmethod
    def from_env(cls, env_var: str = DEFAULT_LEVEL_ENV) -> "ValidationSettings":
        """
        Build settings from an environment variable holding a log level.

        Unset or empty variables yield the defaults.
        """

        value = os.getenv(env_var)
        if not value:
            return cls()
        return cls(log_level=_parse_level(value, key=env_var), source=env_var)

    def describe(self) -> str:
        level = logging.getLevelName(self.log_level)
        return f"{level} (from {self.source})" if self.source else f"{level} (default)"

    def apply(self) -> None:
        """
        Set the package log level, attaching the package handler if missing.
        """
        configure_logging(self.log_level)
        logging.getLogger(ROOT_LOGGER_NAME).info("Log level set to %s", self.describe())
