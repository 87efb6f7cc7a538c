"""MongoConnectionManager: PyMongo client lifecycle and health check."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .exceptions import MongoConnectionError

ClientFactory = Callable[..., "MongoClient[Any]"]


class MongoConnectionManager:
    """Wrap a PyMongo client with lazy connection and health-check helpers."""

    def __init__(
        self,
        url: str = "mongodb://localhost:27017",
        *,
        database: str | None = None,
        server_selection_timeout_ms: int = 5000,
        connect_timeout_ms: int = 10000,
        client_factory: ClientFactory = MongoClient,
        **kwargs: Any,
    ) -> None:
        self._url = url
        self._database = database
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._connect_timeout_ms = connect_timeout_ms
        self._client_factory = client_factory
        self._kwargs = kwargs
        self._client: MongoClient[Any] | None = None

    def connect(self) -> MongoClient[Any]:
        """Create and cache the client. Idempotent."""
        if self._client is not None:
            return self._client
        try:
            self._client = self._client_factory(
                self._url,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                connectTimeoutMS=self._connect_timeout_ms,
                **self._kwargs,
            )
        except PyMongoError as e:
            raise MongoConnectionError(str(e)) from e
        return self._client

    @property
    def client(self) -> MongoClient[Any]:
        """Return the client; raises if not connected."""
        if self._client is None:
            raise MongoConnectionError("Not connected; call connect() first")
        return self._client

    def database(self, name: str | None = None) -> Database[Any]:
        """Return *name* (or the configured default database), connecting lazily."""
        db_name = name or self._database
        if not db_name:
            raise MongoConnectionError("No database name given or configured")
        return self.connect()[db_name]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def health_check(self) -> bool:
        """Ping the server; return True if reachable."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
        except PyMongoError:
            return False
        return True
