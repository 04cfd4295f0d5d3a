"""EventChannel – in-process topic-based publish/subscribe.

A :class:`~catlog.logger.Logger` owns one channel and publishes every
delivered :class:`~catlog.events.LoggingEvent` on the ``"log"`` topic.

Example::

    channel = EventChannel()
    channel.on("log", print)
    channel.emit("log", event)
"""
from __future__ import annotations

import threading
from collections import defaultdict
from typing import Any, Callable

from catlog.diagnostics import get_logger

#: Type alias for a listener callable.
Listener = Callable[..., Any]

_log = get_logger(__name__)


class _Once:
    """Wraps a listener so it unregisters itself before its first call."""

    __slots__ = ("channel", "listener", "topic")

    def __init__(self, channel: EventChannel, topic: str, listener: Listener) -> None:
        self.channel = channel
        self.topic = topic
        self.listener = listener

    def __call__(self, *args: Any) -> Any:
        self.channel.off(self.topic, self)
        return self.listener(*args)


class EventChannel:
    """Topic-keyed listener registry.

    Listeners for a topic run in registration order. :meth:`emit` iterates
    over a snapshot, so listeners may register or unregister others (or
    themselves) while an emission is in progress. A listener that raises is
    reported through diagnostics and does not stop the remaining listeners.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._lock = threading.Lock()

    def on(self, topic: str, listener: Listener) -> EventChannel:
        """Register *listener* for *topic*."""
        with self._lock:
            self._listeners[topic].append(listener)
        return self

    def once(self, topic: str, listener: Listener) -> EventChannel:
        """Register *listener* for the next emission on *topic* only."""
        return self.on(topic, _Once(self, topic, listener))

    def off(self, topic: str, listener: Listener) -> EventChannel:
        """Unregister the most recently added registration of *listener*.

        Unknown listeners are ignored.
        """
        with self._lock:
            registered = self._listeners.get(topic)
            if not registered:
                return self
            for index in range(len(registered) - 1, -1, -1):
                candidate = registered[index]
                if candidate == listener or (
                    isinstance(candidate, _Once) and candidate.listener == listener
                ):
                    del registered[index]
                    break
            if not registered:
                del self._listeners[topic]
        return self

    def remove_all_listeners(self, topic: str | None = None) -> EventChannel:
        with self._lock:
            if topic is None:
                self._listeners.clear()
            else:
                self._listeners.pop(topic, None)
        return self

    def listeners(self, topic: str) -> list[Listener]:
        """Return a copy of the listeners registered for *topic*."""
        with self._lock:
            return [
                item.listener if isinstance(item, _Once) else item
                for item in self._listeners.get(topic, ())
            ]

    def listener_count(self, topic: str) -> int:
        with self._lock:
            return len(self._listeners.get(topic, ()))

    def emit(self, topic: str, *args: Any) -> bool:
        """Call every listener of *topic* with *args*.

        Returns ``True`` if the topic had at least one listener.
        """
        with self._lock:
            snapshot = tuple(self._listeners.get(topic, ()))
        for listener in snapshot:
            try:
                listener(*args)
            except Exception:  # noqa: BLE001
                _log.exception("listener_failed", topic=topic, listener=repr(listener))
        return bool(snapshot)


__all__ = ["EventChannel", "Listener"]
