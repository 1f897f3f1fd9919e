"""Shared append-only data store."""

from __future__ import annotations

import logging
from datetime import datetime

from creational.domain import utc_now

from .guarded import GuardedSingleton

logger = logging.getLogger(__name__)


class DataStore(GuardedSingleton):
    """Process-wide list of string items stamped with its creation time."""

    def __init__(self) -> None:
        super().__init__()
        self._items: list[str] = []
        self._created_at = utc_now()
        logger.debug("Data store created at %s", self._created_at.isoformat())

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def add(self, item: str) -> None:
        with self._lock:
            self._items.append(item)

    def items(self) -> list[str]:
        with self._lock:
            return list(self._items)

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()


__all__ = ["DataStore"]
