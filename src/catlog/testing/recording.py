"""Testing – RecordingListener."""
from __future__ import annotations

from catlog.events import LoggingEvent
from catlog.levels import Level


class RecordingListener:
    """Listener that keeps every delivered event, in delivery order.

    Example::

        recorder = RecordingListener()
        logger.on("log", recorder)
        logger.info("hello")
        assert recorder.messages == [("hello",)]
    """

    def __init__(self) -> None:
        self.events: list[LoggingEvent] = []

    def __call__(self, event: LoggingEvent) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    @property
    def messages(self) -> list[tuple[object, ...]]:
        return [event.data for event in self.events]

    @property
    def levels(self) -> list[Level]:
        return [event.level for event in self.events]

    def clear(self) -> None:
        self.events.clear()


__all__ = ["RecordingListener"]
