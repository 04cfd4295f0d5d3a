"""Diagnostics – structlog wiring for catlog's own internal messages.

These are *not* logging events: they describe problems inside the library
(a listener that raised, an unrecognized level) and go through structlog
and the stdlib :mod:`logging` tree like any other library's diagnostics.

catlog never touches the process-wide structlog configuration. Its loggers
wrap stdlib loggers directly with a private processor chain, so a host
application's ``structlog.configure`` and catlog's output settings stay
independent.
"""
from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import Any

import structlog
from structlog.testing import LogCapture

# Shared by every diagnostics logger; edited in place so loggers created at
# import time pick up later changes.
_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger for internal diagnostics.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or "catlog"),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


def configure(level: int = logging.WARNING, json: bool = True) -> None:
    """Send diagnostics to stderr with a JSON (default) or console renderer.

    Installs a single stream handler on the ``catlog`` stdlib logger and
    sets its level. Safe to call repeatedly.
    """
    _PROCESSORS[-1] = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger = logging.getLogger("catlog")
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(level)


@contextlib.contextmanager
def capture_diagnostics() -> Iterator[list[dict[str, Any]]]:
    """Collect diagnostics as event dicts instead of rendering them.

    Example::

        with capture_diagnostics() as entries:
            Logger("x", "nonsense")
        assert entries[0]["event"] == "level_fallback"
    """
    capture = LogCapture()
    saved = list(_PROCESSORS)
    _PROCESSORS[:] = [capture]
    try:
        yield capture.entries
    finally:
        _PROCESSORS[:] = saved


__all__ = ["capture_diagnostics", "configure", "get_logger"]
