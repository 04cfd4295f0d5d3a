"""Testing helpers – recording listener, frozen clock, diagnostics capture, hypothesis strategies."""
from catlog.clock import FrozenClock
from catlog.diagnostics import capture_diagnostics
from catlog.testing.recording import RecordingListener
from catlog.testing.strategies import NAMED, level_name_strategy, level_strategy

__all__ = [
    "FrozenClock",
    "NAMED",
    "RecordingListener",
    "capture_diagnostics",
    "level_name_strategy",
    "level_strategy",
]
