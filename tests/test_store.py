import asyncio

import pytest

from carreras_api.app.core.errors import StoreError
from carreras_api.app.core.store import KVRepository, encode_value


def run(coro):
    return asyncio.run(coro)


def test_encode_value():
    assert encode_value("ING01") == "ING01"
    assert encode_value(1) == "1"
    assert encode_value(0) == "0"
    assert encode_value([]) == "[]"
    assert encode_value(True) == "true"


def test_list_all_on_empty_index_uses_one_round_trip(repository, kv):
    assert run(repository.list_all("idx:carreras")) == []
    assert kv.round_trips == 1


def test_list_all_uses_two_round_trips(repository, kv):
    entries = [(f"carrera:{i}", {"codigo": str(i)}, ("idx:carreras",)) for i in range(25)]
    run(repository.add_many(entries))
    kv.round_trips = 0
    records = run(repository.list_all("idx:carreras"))
    assert len(records) == 25
    assert kv.round_trips == 2


def test_list_all_drops_members_without_record(repository, kv):
    run(repository.add("carrera:A", {"codigo": "A"}, "idx:carreras"))
    kv.sets["idx:carreras"]["carrera:GONE"] = None
    assert run(repository.list_all("idx:carreras")) == [{"codigo": "A"}]


def test_add_writes_every_index(repository, kv):
    run(repository.add("asignatura:x", {"id": "x", "uc": 0}, "idx:a", "idx:b"))
    assert kv.hashes["asignatura:x"] == {"id": "x", "uc": "0"}
    assert "asignatura:x" in kv.sets["idx:a"]
    assert "asignatura:x" in kv.sets["idx:b"]
    assert kv.round_trips == 1


def test_add_many_without_entries_is_a_no_op(repository, kv):
    assert run(repository.add_many([])) == 0
    assert kv.round_trips == 0


def test_get_exists_and_update(repository, kv):
    assert run(repository.get("carrera:A")) is None
    assert run(repository.exists("carrera:A")) is False
    run(repository.add("carrera:A", {"codigo": "A", "semestre": 1}, "idx:carreras"))
    assert run(repository.exists("carrera:A")) is True
    updated = run(repository.update("carrera:A", {"nombre": "Arq"}))
    assert updated == {"codigo": "A", "semestre": "1", "nombre": "Arq"}


def test_index_names_follow_prefix(kv):
    repo = KVRepository(kv, index_prefix="test")
    assert repo.index("carreras") == "test:carreras"
    assert repo.index("carrera", "ING01", "asignaturas") == "test:carrera:ING01:asignaturas"


def test_client_failures_become_store_errors(repository, kv):
    kv.fail = True
    with pytest.raises(StoreError) as exc_info:
        run(repository.list_all("idx:carreras"))
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    with pytest.raises(StoreError):
        run(repository.add("carrera:A", {"codigo": "A"}, "idx:carreras"))
    with pytest.raises(StoreError):
        run(repository.exists("carrera:A"))
    with pytest.raises(StoreError):
        run(repository.ping())
