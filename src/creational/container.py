"""Service container wiring the shared singletons."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from creational.config import AppSettings
from creational.domain import LogLevel
from creational.prototype import PrototypeRegistry, register_defaults
from creational.singleton import (
    AppLogger,
    ConfigManager,
    DatabaseConnection,
    DataStore,
    SingletonRegistry,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the process-wide services with shared configuration."""

    settings: AppSettings
    data_store: DataStore
    config_manager: ConfigManager
    database: DatabaseConnection
    app_logger: AppLogger
    prototype_registry: PrototypeRegistry


def build_container(
    settings: AppSettings | None = None,
    *,
    singletons: SingletonRegistry | None = None,
) -> ServiceContainer:
    """Resolve the shared services and apply ``settings`` to them.

    ``singletons`` defaults to the process-wide registry; pass a fresh
    :class:`SingletonRegistry` to build an isolated container.
    """

    resolved_settings = settings or AppSettings.from_env()
    source = singletons or SingletonRegistry.get_instance()

    app_logger = source.get(AppLogger)
    try:
        app_logger.set_level(resolved_settings.log_level)
    except ValueError:
        logger.warning(
            "Ignoring unknown log level %s; falling back to INFO",
            resolved_settings.log_level,
        )
        app_logger.set_level(LogLevel.INFO)

    config_manager = source.get(ConfigManager)
    if resolved_settings.config_overrides:
        config_manager.update(resolved_settings.config_overrides)

    database = source.get(DatabaseConnection)
    if not database.configure(
        resolved_settings.database_url, resolved_settings.connect_latency_ms / 1000
    ):
        logger.info("Database already connected; keeping %s", database.connection_string)

    prototype_registry = source.get(PrototypeRegistry)
    if resolved_settings.seed_prototypes and len(prototype_registry) == 0:
        register_defaults(prototype_registry)
        logger.debug("Seeded %d prototypes", len(prototype_registry))

    return ServiceContainer(
        settings=resolved_settings,
        data_store=source.get(DataStore),
        config_manager=config_manager,
        database=database,
        app_logger=app_logger,
        prototype_registry=prototype_registry,
    )


__all__ = ["ServiceContainer", "build_container"]
