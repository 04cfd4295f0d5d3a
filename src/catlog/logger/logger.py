"""Logger – per-category severity filter and event dispatcher.

Usage::

    logger = Logger("orders", "info")
    logger.on("log", handle_event)
    logger.debug("dropped")                  # below threshold
    logger.warn("stock low", {"sku": "A1"})  # delivered synchronously

    enriched = Logger("orders", logging_proxy=LoggingProxy)
    enriched.info("placed").with_({"order_id": 42})   # delivered next tick
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from catlog import levels
from catlog.clock import Clock
from catlog.diagnostics import get_logger
from catlog.events import EventChannel, Listener, LoggingEvent
from catlog.levels import Level
from catlog.logger.proxy import ProxyFactory, SuppressedProxy
from catlog.logger.switch import log_writes_enabled

_log = get_logger(__name__)

DEFAULT_CATEGORY = "[default]"

#: Topic every delivered event is published on.
LOG_TOPIC = "log"

#: Named levels that get ``<name>()`` and ``is_<name>_enabled()`` methods.
NAMED_LEVELS: tuple[str, ...] = ("trace", "debug", "info", "warn", "error", "fatal", "mark")


class Logger:
    """Dispatches accepted log calls for one category.

    Parameters
    ----------
    category:
        Category name; ``None`` or empty means :attr:`DEFAULT_CATEGORY`.
    level:
        Initial threshold (a :class:`~catlog.levels.Level` or level name).
        Unrecognized values leave the class default, ``TRACE``, in place.
    logging_proxy:
        Optional factory called as ``logging_proxy(event, logger)`` for every
        accepted call; its return value is handed back to the call site and
        it becomes responsible for delivery. Without one, events are emitted
        synchronously.
    clock:
        Source of event timestamps; defaults to the system clock.
    """

    DEFAULT_CATEGORY = DEFAULT_CATEGORY

    #: Class-wide threshold used while no instance threshold is set.
    level: Level = levels.TRACE

    if TYPE_CHECKING:
        def trace(self, *args: Any) -> Any: ...
        def debug(self, *args: Any) -> Any: ...
        def info(self, *args: Any) -> Any: ...
        def warn(self, *args: Any) -> Any: ...
        def error(self, *args: Any) -> Any: ...
        def fatal(self, *args: Any) -> Any: ...
        def mark(self, *args: Any) -> Any: ...
        def is_trace_enabled(self) -> bool: ...
        def is_debug_enabled(self) -> bool: ...
        def is_info_enabled(self) -> bool: ...
        def is_warn_enabled(self) -> bool: ...
        def is_error_enabled(self) -> bool: ...
        def is_fatal_enabled(self) -> bool: ...
        def is_mark_enabled(self) -> bool: ...

    def __init__(
        self,
        category: str | None = None,
        level: Level | str | None = None,
        *,
        logging_proxy: ProxyFactory | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._category = category or DEFAULT_CATEGORY
        self.logging_proxy = logging_proxy
        self._clock = clock
        self._channel = EventChannel()
        if level:
            self.set_level(level)

    @property
    def category(self) -> str:
        return self._category

    # ------------------------------------------------------------------
    # Threshold
    # ------------------------------------------------------------------

    def set_level(self, level: Level | str) -> None:
        """Set the threshold; unrecognized input keeps the current one."""
        resolved = levels.to_level(level)
        if resolved is None:
            resolved = self.level or levels.TRACE
            _log.debug("level_fallback", category=self._category, value=repr(level), level=resolved.name)
        self.level = resolved

    def remove_level(self) -> None:
        """Drop the instance threshold and fall back to the class default."""
        self.__dict__.pop("level", None)

    def is_level_enabled(self, other: Level | str) -> bool:
        return self.level.is_less_than_or_equal_to(other)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def log(self, level: Level | str | None, *args: Any) -> Any:
        """Log *args* at *level* (unrecognized levels count as ``INFO``).

        Returns the proxy built by :attr:`logging_proxy` when one is
        configured and the call is accepted, otherwise ``None``.
        """
        log_level = levels.to_level(level, levels.INFO)
        if not self.is_level_enabled(log_level):
            return None
        event = LoggingEvent(
            self._category,
            log_level,
            args,
            self,
            timestamp=self._clock.now() if self._clock is not None else None,
        )
        if callable(self.logging_proxy):
            return self.logging_proxy(event, self)
        self.emit(LOG_TOPIC, event)
        return None

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    def on(self, topic: str, listener: Listener) -> Logger:
        self._channel.on(topic, listener)
        return self

    def once(self, topic: str, listener: Listener) -> Logger:
        self._channel.once(topic, listener)
        return self

    def off(self, topic: str, listener: Listener) -> Logger:
        self._channel.off(topic, listener)
        return self

    def remove_all_listeners(self, topic: str | None = None) -> Logger:
        self._channel.remove_all_listeners(topic)
        return self

    def listeners(self, topic: str) -> list[Listener]:
        return self._channel.listeners(topic)

    def listener_count(self, topic: str) -> int:
        return self._channel.listener_count(topic)

    def emit(self, topic: str, *args: Any) -> bool:
        return self._channel.emit(topic, *args)

    def __repr__(self) -> str:
        return f"Logger(category={self._category!r}, level={self.level.name})"


def _level_methods(name: str) -> tuple[Callable[[Logger], bool], Callable[..., Any]]:
    level = levels.to_level(name, levels.INFO)

    def is_enabled(self: Logger) -> bool:
        return self.is_level_enabled(level)

    def log_at(self: Logger, *args: Any) -> Any:
        if log_writes_enabled() and self.is_level_enabled(level):
            return self.log(level, *args)
        return SuppressedProxy(self.logging_proxy if callable(self.logging_proxy) else None)

    is_enabled.__name__ = f"is_{name}_enabled"
    is_enabled.__qualname__ = f"Logger.is_{name}_enabled"
    is_enabled.__doc__ = f"Return whether {level.name} calls pass this logger's threshold."
    log_at.__name__ = name
    log_at.__qualname__ = f"Logger.{name}"
    log_at.__doc__ = (
        f"Log *args* at {level.name}.\n\n"
        "Returns the configured proxy when accepted, otherwise a\n"
        ":class:`~catlog.logger.SuppressedProxy` (or ``None`` when accepted\n"
        "without a proxy factory)."
    )
    return is_enabled, log_at


for _name in NAMED_LEVELS:
    _is_enabled, _log_at = _level_methods(_name)
    setattr(Logger, f"is_{_name}_enabled", _is_enabled)
    setattr(Logger, _name, _log_at)
del _name, _is_enabled, _log_at


__all__ = ["DEFAULT_CATEGORY", "LOG_TOPIC", "NAMED_LEVELS", "Logger"]
