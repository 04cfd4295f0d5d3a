"""Level Gate – totally ordered severities with name lookup.

Order (lowest to highest)::

    ALL < TRACE < DEBUG < INFO < WARN < ERROR < FATAL < MARK < OFF

``MARK`` sits above every named severity so that ``logger.mark(...)`` is
delivered by any logger whose threshold is not ``OFF``.
"""
from __future__ import annotations

import dataclasses
import sys
from typing import Any, overload


@dataclasses.dataclass(frozen=True, order=True)
class Level:
    """A named severity; instances compare by ``value`` only."""

    value: int
    name: str = dataclasses.field(compare=False)

    def __str__(self) -> str:
        return self.name

    def is_less_than_or_equal_to(self, other: Level | str) -> bool:
        resolved = to_level(other)
        if resolved is None:
            return False
        return self.value <= resolved.value

    def is_greater_than_or_equal_to(self, other: Level | str) -> bool:
        resolved = to_level(other)
        if resolved is None:
            return False
        return self.value >= resolved.value

    def is_equal_to(self, other: Level | str) -> bool:
        resolved = to_level(other)
        if resolved is None:
            return False
        return self.value == resolved.value


ALL = Level(0, "ALL")
TRACE = Level(5000, "TRACE")
DEBUG = Level(10000, "DEBUG")
INFO = Level(20000, "INFO")
WARN = Level(30000, "WARN")
ERROR = Level(40000, "ERROR")
FATAL = Level(50000, "FATAL")
MARK = Level(2**53, "MARK")
OFF = Level(sys.maxsize, "OFF")

LEVELS: tuple[Level, ...] = (ALL, TRACE, DEBUG, INFO, WARN, ERROR, FATAL, MARK, OFF)

_BY_NAME: dict[str, Level] = {level.name: level for level in LEVELS}


@overload
def to_level(value: Any) -> Level | None: ...
@overload
def to_level(value: Any, default: Level) -> Level: ...


def to_level(value: Any, default: Level | None = None) -> Level | None:
    """Resolve *value* to a :class:`Level`, or return *default*.

    Accepts a :class:`Level` (returned unchanged) or a level name matched
    case-insensitively. Any other input, including unknown names and
    ``None``, yields *default*. Never raises.
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        return _BY_NAME.get(value.strip().upper(), default)
    return default


__all__ = [
    "ALL",
    "DEBUG",
    "ERROR",
    "FATAL",
    "INFO",
    "LEVELS",
    "Level",
    "MARK",
    "OFF",
    "TRACE",
    "WARN",
    "to_level",
]
