"""Lenient value readers shared by the settings codecs.

Every reader returns the value to store. When the document value cannot be
used, a warning is logged and the fallback is returned instead, so one bad
field never aborts decoding of the rest of the document.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Type, TypeVar

E = TypeVar("E", bound=Enum)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_enum(enum_type: Type[E], value: Any, default: E, *, field: str, logger: logging.Logger) -> E:
    """Case-insensitive lookup of ``value`` among the member names of ``enum_type``."""

    if isinstance(value, str):
        member = enum_type.__members__.get(value.strip().upper())
        if member is not None:
            return member
    logger.warning("Invalid %s %r. Defaulting to %s.", field, value, default.name)
    return default


def read_bool(value: Any, fallback: bool, *, field: str, logger: logging.Logger) -> bool:
    if isinstance(value, bool):
        return value
    logger.warning("Expected boolean for %s, got %r. Keeping %s.", field, value, fallback)
    return fallback


def read_int(value: Any, fallback: int, *, field: str, logger: logging.Logger) -> int:
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        return value
    elif isinstance(value, float) and value.is_integer():
        return int(value)
    elif isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        return int(value.strip())
    logger.warning("Expected integer for %s, got %r. Keeping %s.", field, value, fallback)
    return fallback


def read_str(
    value: Any,
    fallback: Any,
    *,
    field: str,
    logger: logging.Logger,
    strict: bool = False,
) -> Any:
    """Return ``value`` as a string; ``null`` silently keeps ``fallback``.

    Numbers are stored as their text unless ``strict`` is set, in which case
    only real strings are accepted.
    """

    if isinstance(value, str):
        return value
    if not strict and isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if value is not None:
        logger.warning("Expected string for %s, got %r. Keeping %r.", field, value, fallback)
    return fallback
