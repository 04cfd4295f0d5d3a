"""Levels – severity ordering and lookup."""
from catlog.levels.level import (
    ALL,
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    LEVELS,
    MARK,
    OFF,
    TRACE,
    WARN,
    Level,
    to_level,
)

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
