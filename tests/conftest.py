import mongomock
import pytest
from fastapi.testclient import TestClient

from model_market_api.app.core.db import MongoStore, get_store
from model_market_api.app.main import app

TEST_DB_NAME = "model-market-test"


# ============================================================================
# In-memory MongoDB
# ============================================================================
# mongomock implements the synchronous pymongo API.  The classes below expose
# the subset of motor's awaitable API the services use, delegating the actual
# query semantics ($set, $inc, sort, limit, ...) to mongomock.


class AsyncCursor:
    def __init__(self, cursor):
        self._cursor = cursor

    def sort(self, *args, **kwargs):
        self._cursor = self._cursor.sort(*args, **kwargs)
        return self

    def limit(self, *args, **kwargs):
        self._cursor = self._cursor.limit(*args, **kwargs)
        return self

    async def to_list(self, length=None):
        documents = list(self._cursor)
        return documents if length is None else documents[:length]


class AsyncCollection:
    def __init__(self, collection):
        self.sync = collection

    async def insert_one(self, document):
        return self.sync.insert_one(document)

    async def find_one(self, *args, **kwargs):
        return self.sync.find_one(*args, **kwargs)

    def find(self, *args, **kwargs):
        return AsyncCursor(self.sync.find(*args, **kwargs))

    async def update_one(self, *args, **kwargs):
        return self.sync.update_one(*args, **kwargs)

    async def delete_one(self, *args, **kwargs):
        return self.sync.delete_one(*args, **kwargs)

    async def count_documents(self, *args, **kwargs):
        return self.sync.count_documents(*args, **kwargs)


class AsyncDatabase:
    def __init__(self, database):
        self.sync = database
        self._collections = {}

    def __getitem__(self, name):
        if name not in self._collections:
            self._collections[name] = AsyncCollection(self.sync[name])
        return self._collections[name]


class InMemoryClient:
    def __init__(self, sync_client):
        self.sync = sync_client
        self.closed = False

    def __getitem__(self, name):
        return AsyncDatabase(self.sync[name])

    def close(self):
        self.closed = True


@pytest.fixture(name="mongo_client")
def mongo_client_fixture():
    # mongomock clients of the same host share data; start and end empty.
    client = mongomock.MongoClient()
    client.drop_database(TEST_DB_NAME)
    yield client
    client.drop_database(TEST_DB_NAME)


@pytest.fixture(name="mongo")
def mongo_fixture(mongo_client):
    """Synchronous handle on the in-memory test database."""
    return mongo_client[TEST_DB_NAME]


@pytest.fixture(name="store")
def store_fixture(mongo_client):
    """A ``MongoStore`` whose client is backed by ``mongo``."""
    return MongoStore(
        uri="mongodb://in-memory",
        db_name=TEST_DB_NAME,
        client_factory=lambda uri, **options: InMemoryClient(mongo_client),
    )


@pytest.fixture(name="client")
def client_fixture(store):
    """Provide a test client serving from the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
