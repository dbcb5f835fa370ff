"""Record store: load/save contract shared by every backend.

Invariants:
    - Missing, corrupt or non-list storage loads as an empty list
    - save() returns False on failure and leaves the previous content
    - JSON files are pretty-printed with two-space indentation
"""

import json
import threading

import pytest

from idea_board_api.app.core import storage
from idea_board_api.app.core.storage import (
    COLLECTIONS,
    JsonFileRecordStore,
    MemoryRecordStore,
    SqliteRecordStore,
)


def test_init_creates_every_collection_empty(json_store):
    for name in COLLECTIONS:
        path = json_store.path_for(name)
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == []


def test_init_keeps_existing_content(json_store):
    json_store.save("users", [{"username": "u1"}])
    json_store.init_storage()
    assert json_store.load("users") == [{"username": "u1"}]


def test_save_is_pretty_printed(json_store):
    assert json_store.save("ideas", [{"title": "X", "fundingGoal": 100}])
    text = json_store.path_for("ideas").read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n    \"title\": \"X\"")


def test_save_preserves_order(json_store):
    records = [{"n": 3}, {"n": 1}, {"n": 2}]
    json_store.save("funds", records)
    assert json_store.load("funds") == records


def test_missing_file_loads_empty(tmp_path):
    file_store = JsonFileRecordStore(tmp_path)
    assert file_store.load("users") == []


def test_corrupt_file_loads_empty(json_store):
    json_store.path_for("votes").write_text("{not json", encoding="utf-8")
    assert json_store.load("votes") == []


def test_non_list_file_loads_empty(json_store):
    json_store.path_for("votes").write_text('{"a": 1}', encoding="utf-8")
    assert json_store.load("votes") == []


def test_save_into_missing_directory_fails(tmp_path):
    file_store = JsonFileRecordStore(tmp_path / "absent")
    assert file_store.save("users", [{"username": "u1"}]) is False


def test_unserialisable_save_keeps_previous_content(json_store):
    json_store.save("comments", [{"text": "a"}])
    assert json_store.save("comments", [{"text": object()}]) is False
    assert json_store.load("comments") == [{"text": "a"}]


def test_sqlite_store_round_trip(tmp_path):
    db_store = SqliteRecordStore(tmp_path / "board.db")
    db_store.init_storage()
    assert db_store.load("ideas") == []
    assert db_store.save("ideas", [{"title": "X"}])
    assert db_store.load("ideas") == [{"title": "X"}]


def test_sqlite_init_is_idempotent(tmp_path):
    db_store = SqliteRecordStore(tmp_path / "board.db")
    db_store.init_storage()
    db_store.save("users", [{"username": "u1"}])
    db_store.init_storage()
    assert db_store.load("users") == [{"username": "u1"}]


def test_sqlite_unknown_collection_loads_empty(tmp_path):
    db_store = SqliteRecordStore(tmp_path / "board.db")
    db_store.init_storage()
    assert db_store.load("nope") == []


def test_memory_store_failing_collection():
    memory_store = MemoryRecordStore({"funds": [{"amount": 1}]})
    memory_store.failing.add("funds")
    assert memory_store.save("funds", []) is False
    assert memory_store.load("funds") == [{"amount": 1}]


def test_memory_store_returns_copies():
    memory_store = MemoryRecordStore({"users": [{"username": "u1"}]})
    loaded = memory_store.load("users")
    loaded.append({"username": "u2"})
    assert memory_store.load("users") == [{"username": "u1"}]


def test_lock_is_per_collection(store):
    assert store.lock("users") is store.lock("users")
    assert store.lock("users") is not store.lock("ideas")


def test_locked_overlapping_sets_do_not_deadlock(store):
    finished = []

    def worker(names):
        for _ in range(50):
            with store.locked(*names):
                pass
        finished.append(names)

    threads = [
        threading.Thread(target=worker, args=(("ideas", "funds", "votes"),)),
        threading.Thread(target=worker, args=(("votes", "ideas"),)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)
    assert len(finished) == 2


def test_build_store_selects_backend(monkeypatch, tmp_path):
    monkeypatch.setattr(storage.settings, "storage_backend", "sqlite")
    monkeypatch.setattr(storage.settings, "database_url", str(tmp_path / "x.db"))
    assert isinstance(storage.build_store(), SqliteRecordStore)

    monkeypatch.setattr(storage.settings, "storage_backend", "json")
    monkeypatch.setattr(storage.settings, "data_dir", str(tmp_path / "data"))
    built = storage.build_store()
    assert isinstance(built, JsonFileRecordStore)
    assert built.data_dir == tmp_path / "data"


def test_build_store_rejects_unknown_backend(monkeypatch):
    monkeypatch.setattr(storage.settings, "storage_backend", "redis")
    with pytest.raises(ValueError):
        storage.build_store()
