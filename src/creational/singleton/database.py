"""Simulated database connection with a tracked query history."""

from __future__ import annotations

import logging
import time

from creational.exceptions import InvalidArgumentError, PreconditionNotMetError

from .guarded import GuardedSingleton

DEFAULT_CONNECTION_STRING = "mongodb://localhost:27017/designpatterns"


logger = logging.getLogger(__name__)


class DatabaseConnection(GuardedSingleton):
    """Connection stub; no I/O is performed.

    The connected flag, the connection string and the query history are all
    guarded by the instance lock, so a query can never be recorded against a
    connection that another thread has just closed.
    """

    def __init__(
        self,
        connection_string: str = DEFAULT_CONNECTION_STRING,
        *,
        connect_latency: float = 0.0,
    ) -> None:
        super().__init__()
        self._connection_string = connection_string
        self._connect_latency = max(0.0, connect_latency)
        self._connected = False
        self._history: list[str] = []

    @property
    def connection_string(self) -> str:
        with self._lock:
            return self._connection_string

    @property
    def is_connected(self) -> bool:
        with self._lock:
            return self._connected

    def set_connection_string(self, connection_string: str) -> None:
        if not connection_string:
            msg = "Connection string must not be empty"
            raise InvalidArgumentError(msg)
        with self._lock:
            if self._connected:
                msg = "Cannot change connection string while connected"
                raise PreconditionNotMetError(msg)
            self._connection_string = connection_string

    def set_connect_latency(self, seconds: float) -> None:
        with self._lock:
            self._connect_latency = max(0.0, seconds)

    def configure(self, connection_string: str, connect_latency: float) -> bool:
        """Apply settings in one step; the connection string is kept while connected.

        Returns True when the connection string was applied.
        """

        if not connection_string:
            msg = "Connection string must not be empty"
            raise InvalidArgumentError(msg)
        with self._lock:
            self._connect_latency = max(0.0, connect_latency)
            if self._connected:
                return False
            self._connection_string = connection_string
            return True

    def connect(self) -> bool:
        """Open the connection; calling it while connected is a no-op.

        The simulated latency elapses without holding the instance lock.
        """

        with self._lock:
            if self._connected:
                return True
            connection_string = self._connection_string
            latency = self._connect_latency
        logger.info("Connecting to database: %s", connection_string)
        if latency:
            time.sleep(latency)
        with self._lock:
            if not self._connected:
                self._connected = True
                logger.info("Database connection established")
            return self._connected

    def disconnect(self) -> None:
        with self._lock:
            if self._connected:
                logger.info("Disconnecting from database")
                self._connected = False

    def execute(self, query: str) -> str:
        if not query.strip():
            msg = "Query must not be empty"
            raise InvalidArgumentError(msg)
        with self._lock:
            if not self._connected:
                msg = "Database not connected"
                raise PreconditionNotMetError(msg)
            self._history.append(query)
        return f"Executed: {query}"

    def history(self) -> list[str]:
        with self._lock:
            return list(self._history)


__all__ = ["DEFAULT_CONNECTION_STRING", "DatabaseConnection"]
