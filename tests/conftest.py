"""Shared fixtures: every test starts with writes enabled and no queued deliveries."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from catlog.logger import enable_all_log_writes, run_pending


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Iterator[None]:
    enable_all_log_writes()
    run_pending()
    yield
    enable_all_log_writes()
    run_pending()
    structlog.reset_defaults()
