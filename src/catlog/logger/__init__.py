"""Logger – level filtering, proxies, deferred delivery and the write switch."""
from catlog.logger.logger import DEFAULT_CATEGORY, LOG_TOPIC, NAMED_LEVELS, Logger
from catlog.logger.proxy import LoggingProxy, ProxyFactory, SuppressedProxy
from catlog.logger.scheduling import next_tick, pending_count, run_pending, tick
from catlog.logger.switch import (
    disable_all_log_writes,
    enable_all_log_writes,
    log_writes_enabled,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "LOG_TOPIC",
    "Logger",
    "LoggingProxy",
    "NAMED_LEVELS",
    "ProxyFactory",
    "SuppressedProxy",
    "disable_all_log_writes",
    "enable_all_log_writes",
    "log_writes_enabled",
    "next_tick",
    "pending_count",
    "run_pending",
    "tick",
]
