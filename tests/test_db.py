import asyncio

import mongomock
from pymongo.server_api import ServerApi

from model_market_api.app.core.config import Settings
from model_market_api.app.core.db import MongoStore
from tests.conftest import InMemoryClient


class RecordingFactory:
    """Client factory counting how many clients were built."""

    def __init__(self):
        self.calls = []
        self.clients = []

    def __call__(self, uri, **options):
        self.calls.append((uri, options))
        client = InMemoryClient(mongomock.MongoClient())
        self.clients.append(client)
        return client


def test_store_does_not_connect_until_first_use():
    factory = RecordingFactory()

    store = MongoStore("mongodb://db.example", "market", client_factory=factory)

    assert factory.calls == []
    assert store.connected is False


def test_store_connects_once_and_caches_database():
    factory = RecordingFactory()
    store = MongoStore("mongodb://db.example", "market", client_factory=factory)

    async def use_store():
        first = await store.database()
        second = await store.database()
        return first, second

    first, second = asyncio.run(use_store())

    assert first is second
    assert len(factory.calls) == 1
    assert store.connected is True


def test_concurrent_first_use_builds_a_single_client():
    factory = RecordingFactory()
    store = MongoStore("mongodb://db.example", "market", client_factory=factory)

    async def use_store_concurrently():
        return await asyncio.gather(*(store.models() for _ in range(10)), store.purchases())

    asyncio.run(use_store_concurrently())

    assert len(factory.calls) == 1


def test_store_requests_stable_server_api():
    factory = RecordingFactory()
    store = MongoStore("mongodb://db.example", "market", server_api="1", client_factory=factory)

    asyncio.run(store.database())

    uri, options = factory.calls[0]
    assert uri == "mongodb://db.example"
    assert isinstance(options["server_api"], ServerApi)
    assert options["server_api"].version == "1"


def test_store_omits_server_api_when_disabled():
    factory = RecordingFactory()
    store = MongoStore("mongodb://db.example", "market", server_api=None, client_factory=factory)

    asyncio.run(store.database())

    assert factory.calls[0][1] == {}


def test_close_releases_client():
    factory = RecordingFactory()
    store = MongoStore("mongodb://db.example", "market", client_factory=factory)
    asyncio.run(store.database())

    store.close()

    assert factory.clients[0].closed is True
    assert store.connected is False


def test_close_without_connection_is_a_no_op():
    store = MongoStore("mongodb://db.example", "market", client_factory=RecordingFactory())

    store.close()

    assert store.connected is False


def test_from_settings_uses_connection_settings():
    settings = Settings(mongodb_uri="mongodb://settings.example", mongodb_db_name="from-settings", mongodb_server_api="")

    store = MongoStore.from_settings(settings)

    assert store._uri == "mongodb://settings.example"
    assert store._db_name == "from-settings"
    assert store._server_api is None
