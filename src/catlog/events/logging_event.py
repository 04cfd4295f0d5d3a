"""LoggingEvent – immutable record of one accepted log call."""
from __future__ import annotations

import weakref
from datetime import datetime
from typing import TYPE_CHECKING, Any, Sequence

from catlog.clock import utc_now
from catlog.levels import ALL, Level

if TYPE_CHECKING:
    from catlog.logger import Logger

_PLACEHOLDER_CATEGORY = ""


class LoggingEvent:
    """Structured record of a single log call.

    Every attribute except :attr:`fields` is fixed at construction. ``fields``
    is a list that only grows, through :class:`~catlog.logger.LoggingProxy`
    enrichment, before the event is delivered.

    The originating logger is held by weak reference: :attr:`logger` returns
    ``None`` once that logger has been garbage-collected.
    """

    __slots__ = ("_category_name", "_data", "_fields", "_level", "_logger_ref", "_timestamp")

    def __init__(
        self,
        category_name: str,
        level: Level,
        data: Sequence[Any] = (),
        logger: Logger | None = None,
        *,
        timestamp: datetime | None = None,
    ) -> None:
        self._timestamp = timestamp if timestamp is not None else utc_now()
        self._category_name = category_name
        self._level = level
        self._data = tuple(data)
        self._logger_ref = weakref.ref(logger) if logger is not None else None
        self._fields: list[Any] = []

    @classmethod
    def placeholder(cls) -> LoggingEvent:
        """Empty event wrapped by proxies handed out for suppressed calls."""
        return cls(_PLACEHOLDER_CATEGORY, ALL)

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def category_name(self) -> str:
        return self._category_name

    @property
    def level(self) -> Level:
        return self._level

    @property
    def data(self) -> tuple[Any, ...]:
        return self._data

    @property
    def fields(self) -> list[Any]:
        """Enrichment objects, in the order they were attached."""
        return self._fields

    @property
    def logger(self) -> Logger | None:
        if self._logger_ref is None:
            return None
        return self._logger_ref()

    def __repr__(self) -> str:
        return (
            f"LoggingEvent(category_name={self._category_name!r}, level={self._level.name}, "
            f"data={self._data!r}, fields={self._fields!r})"
        )


__all__ = ["LoggingEvent"]
