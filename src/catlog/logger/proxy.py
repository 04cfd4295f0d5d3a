"""LoggingProxy / SuppressedProxy – the two handles a log call returns.

A :class:`LoggingProxy` wraps an accepted event and delays its delivery by
one tick, so enrichment chained onto the call site lands on the event before
any listener sees it::

    logger.info("order placed").with_({"order_id": 42}).with_({"total": 9.5})

A :class:`SuppressedProxy` is returned when a level-named call is filtered
out. It offers the same chainable surface as no-ops, and is callable for
call sites that want a placeholder proxy.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from catlog.events import LoggingEvent
from catlog.logger.scheduling import next_tick

if TYPE_CHECKING:
    from catlog.logger.logger import Logger

#: Factory signature accepted as ``Logger(logging_proxy=...)``.
ProxyFactory = Callable[..., Any]


class LoggingProxy:
    """Deferred-delivery wrapper around one :class:`LoggingEvent`.

    When *logger* is given, exactly one emission of the event on the
    logger's ``"log"`` topic is scheduled for the next tick. Without a
    logger nothing is ever delivered.
    """

    __slots__ = ("logging_event",)

    def __init__(self, event: LoggingEvent, logger: Logger | None = None) -> None:
        self.logging_event = event
        if logger is not None:
            next_tick(lambda: logger.emit("log", self.logging_event))

    def fields(self, obj: Any) -> LoggingProxy:
        """Attach *obj* to the event's ``fields``."""
        self.logging_event.fields.append(obj)
        return self

    def with_(self, obj: Any) -> LoggingProxy:
        """Synonym of :meth:`fields`."""
        self.logging_event.fields.append(obj)
        return self

    def __repr__(self) -> str:
        return f"LoggingProxy({self.logging_event!r})"


class SuppressedProxy:
    """Handle for a call that was filtered out before an event existed."""

    __slots__ = ("_factory",)

    def __init__(self, factory: ProxyFactory | None = None) -> None:
        self._factory = factory

    def __call__(self) -> Any:
        """Return an undelivered proxy around an empty event, or ``None``."""
        if self._factory is None:
            return None
        return self._factory(LoggingEvent.placeholder())

    def fields(self, _obj: Any) -> SuppressedProxy:
        return self

    def with_(self, _obj: Any) -> SuppressedProxy:
        return self

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "SuppressedProxy()"


__all__ = ["LoggingProxy", "ProxyFactory", "SuppressedProxy"]
