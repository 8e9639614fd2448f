"""
MongoDB client factory for the Sales CRUD CLI.

Holds the single client handle the process uses for its whole lifetime. The
ClientManager singleton builds the client on first use and closes it at
interpreter exit. There is no pooling configuration, retry, or
health check here: a client that cannot be built is a configuration error and
is surfaced as `ConnectionConfigError`.
"""

from __future__ import annotations

import atexit
import threading
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError

from sales_crud.config import Settings, get_settings
from sales_crud.errors import ConnectionConfigError
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)


def _build_client(settings: Settings) -> MongoClient:
    """Construct a MongoClient from settings, translating driver config errors."""
    uri = settings.connection_uri()
    try:
        # MongoClient connects lazily; only URI and option parsing happen here.
        return MongoClient(
            uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            appname="sales-crud",
        )
    except (ConfigurationError, ValueError, TypeError) as exc:
        raise ConnectionConfigError("Could not create MongoDB client", str(exc)) from exc


class ClientManager:
    """
    Thread-safe singleton owning the process-wide MongoClient.

    Handles lifecycle management with automatic cleanup via atexit hook.
    """

    _instance: Optional["ClientManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ClientManager":
        """Create or return the singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._client: Optional[MongoClient] = None
                atexit.register(cls._instance.close)
            return cls._instance

    def get_client(self, settings: Optional[Settings] = None) -> MongoClient:
        """
        Get or create the MongoClient.

        Parameters
        ----------
        settings : Settings | None
            Overrides the cached application settings (used by tests).

        Returns
        -------
        MongoClient
            The managed client instance.

        Raises
        ------
        ConnectionConfigError
            If the connection string or client options are invalid.
        """
        with self._lock:
            if self._client is None:
                settings = settings or get_settings()
                self._client = _build_client(settings)
                log.info(
                    "MongoDB client created",
                    extra={"host": settings.mongo_host, "database": settings.mongo_db},
                )
            return self._client

    def close(self) -> None:
        """
        Close the managed client and release resources.

        This is called automatically on exit via atexit hook.
        """
        with self._lock:
            if self._client is not None:
                try:
                    self._client.close()
                finally:
                    self._client = None


def get_client(settings: Optional[Settings] = None) -> MongoClient:
    """Return the process-wide MongoClient via ClientManager."""
    return ClientManager().get_client(settings)


def get_collection(
    name: Optional[str] = None, settings: Optional[Settings] = None
) -> Collection:
    """
    Return the configured collection (default `test_db.sales`).

    Parameters
    ----------
    name : str | None
        Collection name override; defaults to settings.mongo_collection.
    settings : Settings | None
        Overrides the cached application settings.
    """
    settings = settings or get_settings()
    client = get_client(settings)
    return client[settings.mongo_db][name or settings.mongo_collection]


__all__ = [
    "ClientManager",
    "get_client",
    "get_collection",
]
