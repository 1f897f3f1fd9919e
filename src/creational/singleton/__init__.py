"""Guarded singleton exports."""

from .config_manager import DEFAULT_CONFIG, ConfigManager
from .database import DEFAULT_CONNECTION_STRING, DatabaseConnection
from .guarded import GuardedSingleton, SingletonRegistry, get_singleton
from .logger import AppLogger, LogEntry
from .store import DataStore

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONNECTION_STRING",
    "AppLogger",
    "ConfigManager",
    "DataStore",
    "DatabaseConnection",
    "GuardedSingleton",
    "LogEntry",
    "SingletonRegistry",
    "get_singleton",
]
