"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

CONFIG_OVERRIDE_PREFIX = "CREATIONAL_CONFIG__"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


def _config_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for name, value in environ.items():
        if name.startswith(CONFIG_OVERRIDE_PREFIX):
            key = name[len(CONFIG_OVERRIDE_PREFIX) :].lower()
            if key:
                overrides[key] = value
    return overrides


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "INFO"
    database_url: str = "mongodb://localhost:27017/designpatterns"
    connect_latency_ms: int = 0
    seed_prototypes: bool = True
    config_overrides: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("CREATIONAL_ENV", cls.environment),
            log_level=os.getenv("CREATIONAL_LOG_LEVEL", cls.log_level).upper(),
            database_url=os.getenv("CREATIONAL_DATABASE_URL", cls.database_url),
            connect_latency_ms=_env_int("CREATIONAL_CONNECT_LATENCY_MS", cls.connect_latency_ms),
            seed_prototypes=_env_bool("CREATIONAL_SEED_PROTOTYPES", cls.seed_prototypes),
            config_overrides=_config_overrides(os.environ),
        )


__all__ = ["AppSettings", "CONFIG_OVERRIDE_PREFIX"]
