"""
MongoDB integration.

``MongoStore`` owns the single ``motor`` client shared by every request.
The client is created lazily on first use and cached afterwards; an
``asyncio.Lock`` makes sure concurrent first requests create exactly one
client.  The application builds the store during startup and closes it
on shutdown (see ``main.create_app``); route handlers obtain it through
the ``get_store`` dependency, which tests override with an in‑memory
store.

The store exposes the two collections used by the service, ``models``
and ``purchases``.  All querying happens in the service layer directly
against these collection handles.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from .config import Settings, settings as default_settings

MODELS_COLLECTION = "models"
PURCHASES_COLLECTION = "purchases"

logger = logging.getLogger(__name__)


class MongoStore:
    """Lazily connected handle to the service database.

    Parameters
    ----------
    uri : str
        MongoDB connection string.
    db_name : str
        Name of the database holding the collections.
    server_api : Optional[str]
        Stable API version to request, or ``None``/empty to omit it.
    client_factory : Callable
        Callable building the client from ``uri`` and keyword options.
        Defaults to ``AsyncIOMotorClient``.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        server_api: Optional[str] = None,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ) -> None:
        self._uri = uri
        self._db_name = db_name
        self._server_api = server_api
        self._client_factory = client_factory
        self._client: Optional[Any] = None
        self._db: Optional[AsyncIOMotorDatabase] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "MongoStore":
        return cls(
            uri=settings.mongodb_uri,
            db_name=settings.mongodb_db_name,
            server_api=settings.mongodb_server_api or None,
        )

    @property
    def connected(self) -> bool:
        return self._db is not None

    async def database(self) -> AsyncIOMotorDatabase:
        """Return the database handle, connecting on first call."""
        if self._db is not None:
            return self._db
        async with self._lock:
            # Another coroutine may have connected while we waited.
            if self._db is None:
                options = {}
                if self._server_api:
                    options["server_api"] = ServerApi(self._server_api, strict=True, deprecation_errors=True)
                self._client = self._client_factory(self._uri, **options)
                self._db = self._client[self._db_name]
                logger.info("MongoDB client created for database '%s'", self._db_name)
        return self._db

    async def models(self) -> AsyncIOMotorCollection:
        db = await self.database()
        return db[MODELS_COLLECTION]

    async def purchases(self) -> AsyncIOMotorCollection:
        db = await self.database()
        return db[PURCHASES_COLLECTION]

    def close(self) -> None:
        """Close the client if one was created.

        Only called on application shutdown; handlers never close the
        shared store.
        """
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB client closed")
        self._client = None
        self._db = None


def get_store(request: Request) -> MongoStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
