"""Builder exports."""

from .computer import Computer, ComputerBuilder, ComputerDirector
from .http import DEFAULT_TIMEOUT_MS, HttpRequest, HttpRequestBuilder
from .sql import SQLQuery, SQLQueryBuilder

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "Computer",
    "ComputerBuilder",
    "ComputerDirector",
    "HttpRequest",
    "HttpRequestBuilder",
    "SQLQuery",
    "SQLQueryBuilder",
]
