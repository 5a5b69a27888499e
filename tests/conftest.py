import pytest
from fastapi.testclient import TestClient

from carreras_api.app.core.config import Settings
from carreras_api.app.core.store import KVRepository
from carreras_api.app.main import create_app


class FakeBatch:
    """Queued commands of a pipeline or MULTI block, applied on exec()."""

    def __init__(self, store):
        self.store = store
        self.commands = []

    def hset(self, key, field=None, value=None, values=None):
        self.commands.append(("hset", (key, field, value, values)))
        return self

    def hgetall(self, key):
        self.commands.append(("hgetall", (key,)))
        return self

    def sadd(self, key, *members):
        self.commands.append(("sadd", (key,) + members))
        return self

    async def exec(self):
        self.store._round_trip()
        return [getattr(self.store, "_" + name)(*args) for name, args in self.commands]


class FakeKV:
    """In-memory stand-in for the async Upstash client.

    Counts network round trips and write commands, and can be told to
    fail every call.
    """

    def __init__(self):
        self.hashes = {}
        self.sets = {}
        self.round_trips = 0
        self.writes = 0
        self.fail = False

    def _round_trip(self):
        if self.fail:
            raise ConnectionError("store unreachable")
        self.round_trips += 1

    def _hset(self, key, field=None, value=None, values=None):
        mapping = dict(values or {})
        if field is not None:
            mapping[field] = value
        for v in mapping.values():
            assert isinstance(v, str), "hash values must be encoded as strings"
        self.writes += 1
        record = self.hashes.setdefault(key, {})
        added = len(set(mapping) - set(record))
        record.update(mapping)
        return added

    def _hgetall(self, key):
        return dict(self.hashes.get(key, {}))

    def _sadd(self, key, *members):
        self.writes += 1
        members_dict = self.sets.setdefault(key, {})
        added = 0
        for member in members:
            if member not in members_dict:
                members_dict[member] = None
                added += 1
        return added

    async def smembers(self, key):
        self._round_trip()
        return list(self.sets.get(key, {}))

    async def hgetall(self, key):
        self._round_trip()
        return self._hgetall(key)

    async def hset(self, key, field=None, value=None, values=None):
        self._round_trip()
        return self._hset(key, field, value, values)

    async def sadd(self, key, *members):
        self._round_trip()
        return self._sadd(key, *members)

    async def exists(self, *keys):
        self._round_trip()
        return sum(1 for key in keys if key in self.hashes or key in self.sets)

    async def ping(self):
        self._round_trip()
        return "PONG"

    def pipeline(self):
        return FakeBatch(self)

    def multi(self):
        return FakeBatch(self)


@pytest.fixture
def kv():
    return FakeKV()


@pytest.fixture
def repository(kv):
    return KVRepository(kv)


@pytest.fixture
def client(repository):
    settings = Settings(kv_rest_api_url="https://kv.example", kv_rest_api_token="secret")
    app = create_app(repository=repository, settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def career(client):
    r = client.post("/api/carreras", json=[{"codigo": "ING01", "semestre": 1}])
    assert r.status_code == 201
    return "ING01"
