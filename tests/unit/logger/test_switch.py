"""Unit tests for the global write switch."""

from __future__ import annotations

import threading

from catlog.logger import (
    NAMED_LEVELS,
    Logger,
    disable_all_log_writes,
    enable_all_log_writes,
    log_writes_enabled,
)
from catlog.testing import RecordingListener


class TestWriteSwitch:
    def test_enabled_by_default(self) -> None:
        assert log_writes_enabled() is True

    def test_disable_and_enable_are_idempotent(self) -> None:
        disable_all_log_writes()
        disable_all_log_writes()
        assert log_writes_enabled() is False
        enable_all_log_writes()
        enable_all_log_writes()
        assert log_writes_enabled() is True

    def test_disable_silences_every_logger_and_level(self) -> None:
        loggers = [Logger("a"), Logger("b", "trace"), Logger("c", "fatal")]
        recorder = RecordingListener()
        for logger in loggers:
            logger.on("log", recorder)
        disable_all_log_writes()
        for logger in loggers:
            for name in NAMED_LEVELS:
                getattr(logger, name)("x")
        assert len(recorder) == 0

    def test_disable_keeps_thresholds_and_predicates(self) -> None:
        logger = Logger("a", "warn")
        disable_all_log_writes()
        assert logger.is_error_enabled()
        assert not logger.is_info_enabled()

    def test_enable_resumes_normal_filtering(self) -> None:
        logger = Logger("a", "warn")
        recorder = RecordingListener()
        logger.on("log", recorder)
        disable_all_log_writes()
        logger.error("dropped")
        enable_all_log_writes()
        logger.info("filtered")
        logger.error("kept")
        assert recorder.messages == [("kept",)]

    def test_suppressed_handle_without_proxy_is_noop_callable(self) -> None:
        logger = Logger()
        disable_all_log_writes()
        handle = logger.info("x")
        assert handle() is None
        assert not handle

    def test_toggling_from_threads(self) -> None:
        def flip(n: int) -> None:
            for i in range(200):
                if (i + n) % 2:
                    disable_all_log_writes()
                else:
                    enable_all_log_writes()

        threads = [threading.Thread(target=flip, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        enable_all_log_writes()
        assert log_writes_enabled() is True
