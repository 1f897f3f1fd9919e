"""In-memory application logger retaining entries at or above a minimum level."""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import Field

from creational.domain import LogLevel, ValueModel, utc_now

from .guarded import GuardedSingleton

_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


logger = logging.getLogger(__name__)


class LogEntry(ValueModel):
    """A single retained log record."""

    level: LogLevel
    message: str
    category: str = ""
    timestamp: datetime = Field(default_factory=utc_now)


class AppLogger(GuardedSingleton):
    """Shared logger whose entries can be read back by callers.

    Retained entries are also forwarded to the standard ``logging`` module.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO) -> None:
        super().__init__()
        self._entries: list[LogEntry] = []
        self._level = level

    @property
    def level(self) -> LogLevel:
        with self._lock:
            return self._level

    def set_level(self, level: LogLevel | str | int) -> None:
        resolved = LogLevel.parse(level)
        with self._lock:
            self._level = resolved

    def log(
        self, level: LogLevel | str | int, message: str, category: str = ""
    ) -> LogEntry | None:
        """Retain ``message`` when ``level`` meets the minimum.

        Returns the retained entry, or ``None`` when the message was filtered.
        """

        resolved = LogLevel.parse(level)
        with self._lock:
            if resolved < self._level:
                return None
            entry = LogEntry(level=resolved, message=message, category=category)
            self._entries.append(entry)
        if category:
            logger.log(_STDLIB_LEVELS[resolved], "[%s] %s", category, message)
        else:
            logger.log(_STDLIB_LEVELS[resolved], "%s", message)
        return entry

    def debug(self, message: str, category: str = "") -> LogEntry | None:
        return self.log(LogLevel.DEBUG, message, category)

    def info(self, message: str, category: str = "") -> LogEntry | None:
        return self.log(LogLevel.INFO, message, category)

    def warn(self, message: str, category: str = "") -> LogEntry | None:
        return self.log(LogLevel.WARN, message, category)

    def error(self, message: str, category: str = "") -> LogEntry | None:
        return self.log(LogLevel.ERROR, message, category)

    def entries(self, level: LogLevel | None = None) -> list[LogEntry]:
        """Return retained entries, optionally only those of exactly ``level``."""

        with self._lock:
            if level is None:
                return list(self._entries)
            return [entry for entry in self._entries if entry.level == level]

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


__all__ = ["AppLogger", "LogEntry"]
