"""Shared fixtures: in-memory store, services and a FastAPI test client.

Invariants:
    - Every test gets a fresh MemoryRecordStore with all seven collections
    - The client's get_store dependency resolves to that same store
"""

import pytest
from fastapi.testclient import TestClient

from idea_board_api.app.core.storage import JsonFileRecordStore, MemoryRecordStore
from idea_board_api.app.main import create_app
from idea_board_api.app.services.board import build_services


@pytest.fixture
def store():
    memory_store = MemoryRecordStore()
    memory_store.init_storage()
    return memory_store


@pytest.fixture
def json_store(tmp_path):
    file_store = JsonFileRecordStore(tmp_path / "data")
    file_store.init_storage()
    return file_store


@pytest.fixture
def services(store):
    return build_services(store)


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client
