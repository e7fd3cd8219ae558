# tests/conftest.py
import os
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from garage.main import create_app  # noqa: E402
from garage.storage.memory import MemoryCarStore  # noqa: E402
from garage.storage.sql import SqlCarStore  # noqa: E402


# ---------- Test config: no seeding, no files outside tmp ----------
@pytest.fixture(autouse=True)
def test_config(monkeypatch, tmp_path):
    monkeypatch.setattr("garage.config.SEED_EXAMPLE", False, raising=False)
    monkeypatch.setattr("garage.config.DATABASE_URL", f"sqlite:///{tmp_path / 'config.db'}", raising=False)
    yield


@pytest.fixture()
def memory_store():
    return MemoryCarStore()


@pytest.fixture()
def sql_store(tmp_path):
    store = SqlCarStore(f"sqlite:///{tmp_path / 'cars.db'}")
    yield store
    store.close()


# Tests that take `store` (or `client`) run once per backend
@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    return request.getfixturevalue(f"{'sql' if request.param == 'sqlite' else 'memory'}_store")


def _client(store):
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture()
def client(store):
    yield from _client(store)


@pytest.fixture()
def memory_client(memory_store):
    yield from _client(memory_store)


@pytest.fixture()
def sql_client(sql_store):
    yield from _client(sql_store)


@pytest.fixture()
def car_payload():
    return {
        "user_id": "user123",
        "make": "Honda",
        "model": "Accord",
        "year": 2003,
        "vin": "1HGCM82633A004352",
        "mileage": 150000,
        "last_service_date": "2023-11-15",
    }


@pytest.fixture()
def minimal_payload():
    return {"user_id": "user456", "make": "Ford", "model": "Focus", "year": 2015}
