"""Unit tests for EventChannel."""

from __future__ import annotations

from typing import Any

from catlog.events import EventChannel
from catlog.testing import capture_diagnostics


class TestRegistration:
    def test_emit_without_listeners_returns_false(self) -> None:
        assert EventChannel().emit("log", "x") is False

    def test_listeners_called_in_registration_order(self) -> None:
        channel = EventChannel()
        calls: list[str] = []
        channel.on("log", lambda e: calls.append(f"a:{e}"))
        channel.on("log", lambda e: calls.append(f"b:{e}"))
        assert channel.emit("log", 1) is True
        assert calls == ["a:1", "b:1"]

    def test_topics_are_independent(self) -> None:
        channel = EventChannel()
        calls: list[Any] = []
        channel.on("log", calls.append)
        channel.emit("other", "ignored")
        assert calls == []

    def test_on_returns_channel_for_chaining(self) -> None:
        channel = EventChannel()
        assert channel.on("log", print).off("log", print) is channel

    def test_off_removes_listener(self) -> None:
        channel = EventChannel()
        calls: list[Any] = []
        channel.on("log", calls.append)
        channel.off("log", calls.append)
        channel.emit("log", 1)
        assert calls == []
        assert channel.listener_count("log") == 0

    def test_off_unknown_listener_is_ignored(self) -> None:
        channel = EventChannel()
        channel.off("log", print)
        assert channel.listeners("log") == []

    def test_once_fires_a_single_time(self) -> None:
        channel = EventChannel()
        calls: list[Any] = []
        channel.once("log", calls.append)
        assert channel.listeners("log") == [calls.append]
        channel.emit("log", 1)
        channel.emit("log", 2)
        assert calls == [1]

    def test_off_removes_once_listener_before_it_fires(self) -> None:
        channel = EventChannel()
        calls: list[Any] = []
        channel.once("log", calls.append)
        channel.off("log", calls.append)
        channel.emit("log", 1)
        assert calls == []

    def test_remove_all_listeners(self) -> None:
        channel = EventChannel()
        channel.on("a", print).on("b", print)
        channel.remove_all_listeners("a")
        assert channel.listener_count("a") == 0
        assert channel.listener_count("b") == 1
        channel.remove_all_listeners()
        assert channel.listener_count("b") == 0


class TestEmitSafety:
    def test_listener_added_during_emit_not_called_this_round(self) -> None:
        channel = EventChannel()
        late: list[Any] = []

        def register(event: Any) -> None:
            channel.on("log", late.append)

        channel.on("log", register)
        channel.emit("log", 1)
        assert late == []
        channel.emit("log", 2)
        assert late == [2]

    def test_listener_removing_itself_during_emit(self) -> None:
        channel = EventChannel()
        calls: list[str] = []

        def first(event: Any) -> None:
            calls.append("first")
            channel.off("log", first)

        channel.on("log", first)
        channel.on("log", lambda e: calls.append("second"))
        channel.emit("log", 1)
        channel.emit("log", 2)
        assert calls == ["first", "second", "second"]

    def test_failing_listener_is_reported_and_others_still_run(self) -> None:
        channel = EventChannel()
        calls: list[Any] = []

        def broken(event: Any) -> None:
            raise RuntimeError("boom")

        channel.on("log", broken)
        channel.on("log", calls.append)
        with capture_diagnostics() as logs:
            assert channel.emit("log", "x") is True
        assert calls == ["x"]
        failures = [entry for entry in logs if entry["event"] == "listener_failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["topic"] == "log"
        assert failures[0]["exc_info"] is True
