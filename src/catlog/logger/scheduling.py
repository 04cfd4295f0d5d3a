"""Next-tick scheduling for deferred event delivery.

:func:`next_tick` runs a callback after the current synchronous code has
finished, in FIFO order relative to other callbacks scheduled by the same
thread:

* inside a running :mod:`asyncio` event loop it uses ``loop.call_soon``;
* otherwise the callback joins a queue owned by the calling thread. The
  queue is drained only at explicit tick boundaries: :func:`run_pending`,
  the end of a :func:`tick` block, and interpreter exit (main thread only).
  A worker thread without an event loop must reach one of the first two
  before it finishes, or its queued deliveries are dropped with it.

Logging calls never drain the queue, so a proxy may be enriched for as long
as the thread has not reached a tick boundary.
"""
from __future__ import annotations

import asyncio
import atexit
import contextlib
import threading
from collections import deque
from collections.abc import Iterator
from typing import Callable

from catlog.diagnostics import get_logger

_log = get_logger(__name__)


class _PendingQueue(threading.local):
    def __init__(self) -> None:
        self.callbacks: deque[Callable[[], None]] = deque()


_local = _PendingQueue()


def next_tick(callback: Callable[[], None]) -> None:
    """Schedule *callback* to run once on the calling thread's next tick."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        _local.callbacks.append(callback)
        return
    loop.call_soon(callback)


def run_pending() -> int:
    """Run the calling thread's queued callbacks (oldest first).

    Callbacks scheduled while draining are run in the same pass. Returns
    how many ran.
    """
    callbacks = _local.callbacks
    ran = 0
    while callbacks:
        callbacks.popleft()()
        ran += 1
    return ran


def pending_count() -> int:
    return len(_local.callbacks)


@contextlib.contextmanager
def tick() -> Iterator[None]:
    """Treat the end of the block as a tick boundary.

    Example::

        with tick():
            logger.info("order placed").with_({"order_id": 42})
        # delivered here
    """
    try:
        yield
    finally:
        run_pending()


def _drain_at_exit() -> None:
    ran = run_pending()
    if ran:
        _log.debug("pending_drained", count=ran)


atexit.register(_drain_at_exit)

__all__ = ["next_tick", "pending_count", "run_pending", "tick"]
