"""Logging helpers for fieldcheck."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

ROOT_LOGGER_NAME = "fieldcheck"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Attach the package handler once and set the package log level.

    Repeated calls only change the level.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


@contextmanager
def time_call(name: str, logger: logging.Logger, *, threshold_ms: int = 100, **fields: object) -> Iterator[None]:
    """
    Log how long the wrapped block took.

    Keyword arguments are attached to the record as a ``fields`` mapping.
    """
    start = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
        extra = {"fields": dict(fields), "elapsed_ms": elapsed_ms}
        logger.log(level, "%s took %.2fms", name, elapsed_ms, extra=extra)
