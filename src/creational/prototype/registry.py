"""Keyed registry of prototype templates."""

from __future__ import annotations

import logging

from creational.exceptions import InvalidArgumentError, NotFoundError
from creational.singleton import GuardedSingleton

from .base import Prototype

logger = logging.getLogger(__name__)


class PrototypeRegistry(GuardedSingleton):
    """Maps string keys to templates and hands out independent clones.

    The registry keeps a private copy of every registered template, so neither
    the registering caller nor any clone recipient can mutate a stored entry.
    A single lock guards every lookup and mutation of the map.
    """

    def __init__(self) -> None:
        super().__init__()
        self._prototypes: dict[str, Prototype] = {}

    def register(self, key: str, prototype: Prototype) -> None:
        """Store ``prototype`` under ``key``; an existing entry is replaced."""

        if not key:
            msg = "Prototype key must be a non-empty string"
            raise InvalidArgumentError(msg)
        template = prototype.clone()
        with self._lock:
            replaced = key in self._prototypes
            self._prototypes[key] = template
        if replaced:
            logger.warning("Replaced prototype registered under %s", key)
        else:
            logger.debug("Registered prototype %s (%s)", key, type(template).__name__)

    def create_clone(self, key: str) -> Prototype:
        """Return a fresh clone of the template stored under ``key``."""

        with self._lock:
            try:
                template = self._prototypes[key]
            except KeyError as exc:
                msg = f"No prototype registered under {key!r}"
                raise NotFoundError(msg) from exc
            return template.clone()

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._prototypes

    def remove(self, key: str) -> bool:
        """Drop the template under ``key``; returns False when it was absent."""

        with self._lock:
            return self._prototypes.pop(key, None) is not None

    def list_keys(self) -> list[str]:
        with self._lock:
            return sorted(self._prototypes)

    def clear(self) -> None:
        with self._lock:
            self._prototypes.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._prototypes

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)


__all__ = ["PrototypeRegistry"]
