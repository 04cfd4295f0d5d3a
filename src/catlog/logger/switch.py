"""Global write switch – process-wide kill switch for every logger.

Initialised enabled at import time. Only :func:`disable_all_log_writes` and
:func:`enable_all_log_writes` change it; every level-named convenience call
(``logger.info(...)`` and friends) reads it before anything else.
"""
from __future__ import annotations

import threading


class _WriteSwitch:
    __slots__ = ("_lock", "enabled")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.enabled = True

    def set(self, enabled: bool) -> None:
        with self._lock:
            self.enabled = enabled


_SWITCH = _WriteSwitch()


def disable_all_log_writes() -> None:
    """Suppress every level-named call on every logger until re-enabled."""
    _SWITCH.set(False)


def enable_all_log_writes() -> None:
    """Resume normal per-logger level filtering."""
    _SWITCH.set(True)


def log_writes_enabled() -> bool:
    return _SWITCH.enabled


__all__ = ["disable_all_log_writes", "enable_all_log_writes", "log_writes_enabled"]
