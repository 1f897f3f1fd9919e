"""Process-wide key/value configuration store."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from creational.exceptions import InvalidArgumentError, NotFoundError

from .guarded import GuardedSingleton

DEFAULT_CONFIG: Mapping[str, str] = MappingProxyType(
    {
        "api_url": "https://api.example.com",
        "timeout": "5000",
        "retries": "3",
        "debug": "false",
        "max_connections": "100",
    }
)


class ConfigManager(GuardedSingleton):
    """String configuration seeded with application defaults."""

    def __init__(self, defaults: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self._values: dict[str, str] = dict(DEFAULT_CONFIG if defaults is None else defaults)

    def get(self, key: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._values.get(key, default)

    def require(self, key: str) -> str:
        with self._lock:
            try:
                return self._values[key]
            except KeyError as exc:
                msg = f"Configuration key {key!r} is not set"
                raise NotFoundError(msg) from exc

    def set(self, key: str, value: str) -> None:
        if not key:
            msg = "Configuration key must be a non-empty string"
            raise InvalidArgumentError(msg)
        with self._lock:
            self._values[key] = value

    def update(self, values: Mapping[str, str]) -> None:
        """Apply several keys atomically."""

        if any(not key for key in values):
            msg = "Configuration keys must be non-empty strings"
            raise InvalidArgumentError(msg)
        with self._lock:
            self._values.update(values)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._values

    def remove(self, key: str) -> bool:
        with self._lock:
            return self._values.pop(key, None) is not None

    def all(self) -> dict[str, str]:
        with self._lock:
            return dict(self._values)


__all__ = ["DEFAULT_CONFIG", "ConfigManager"]
