"""Events – logging event record and the publish/subscribe channel."""
from catlog.events.channel import EventChannel, Listener
from catlog.events.logging_event import LoggingEvent

__all__ = ["EventChannel", "Listener", "LoggingEvent"]
