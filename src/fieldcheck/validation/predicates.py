"""
Predicate helpers used to decide whether a validation error should be recorded.
"""

from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Any, Iterable, TypeVar

T = TypeVar("T")

EMAIL_RX: re.Pattern[str] = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\Z"
)


def permitted_value(value: T, *permitted: T) -> bool:
    """
    Return ``True`` when ``value`` equals one of ``permitted``.
    """
    return any(value == candidate for candidate in permitted)


def matches(value: str, pattern: str | re.Pattern[str]) -> bool:
    """
    Return ``True`` when ``pattern`` finds a match in ``value``.

    String patterns are compiled on the fly; anchoring is left to the pattern.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    elif not isinstance(pattern, re.Pattern):
        raise TypeError(f"Expected a string or compiled pattern, got {type(pattern).__name__}.")
    return pattern.search(value) is not None


def unique(values: Iterable[T]) -> bool:
    items = list(values)
    if all(isinstance(item, Hashable) for item in items):
        try:
            return len(set(items)) == len(items)
        except TypeError:
            # tuples holding unhashable members pass the Hashable check
            pass
    return _unique_by_equality(items)


def _unique_by_equality(items: list[Any]) -> bool:
    for index, item in enumerate(items):
        for other in items[index + 1 :]:
            if item == other:
                return False
    return True
