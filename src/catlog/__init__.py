"""
catlog – leveled, per-category logging core.

Import path convention::

    from catlog import Logger, LoggingProxy
    from catlog.levels import INFO, to_level
"""

from catlog.events import EventChannel, LoggingEvent
from catlog.levels import Level, to_level
from catlog.logger import (
    Logger,
    LoggingProxy,
    SuppressedProxy,
    disable_all_log_writes,
    enable_all_log_writes,
    log_writes_enabled,
)

__version__ = "0.1.0"
__all__ = [
    "EventChannel",
    "Level",
    "Logger",
    "LoggingEvent",
    "LoggingProxy",
    "SuppressedProxy",
    "__version__",
    "disable_all_log_writes",
    "enable_all_log_writes",
    "log_writes_enabled",
    "to_level",
]
