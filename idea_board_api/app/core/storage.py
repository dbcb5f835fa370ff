"""
Record store: durable load/save of named collections.

Every collection on the board is an ordered list of loosely typed
records (plain dicts).  A store reads a whole collection with
``load`` and overwrites it with ``save``; there are no partial or
delta writes.  Read failures are logged and presented as an empty
collection, write failures are logged and reported by returning
``False`` so that callers can turn them into a ``PersistError``.

Three backends are provided:

* ``JsonFileRecordStore`` keeps one pretty‑printed JSON file per
  collection so the data stays human‑inspectable and editable.
* ``SqliteRecordStore`` keeps each collection as a JSON text row in an
  embedded SQLite database, with the same migration mechanism used
  across the project.
* ``MemoryRecordStore`` keeps collections in process memory and is
  meant for tests.

Each store also hands out one re‑entrant lock per collection.  Services
hold it around their load‑mutate‑save sequence so that two requests
touching the same collection cannot overwrite each other's changes
within a single process.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .config import settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

COLLECTIONS = (
    "users",
    "ideas",
    "funds",
    "votes",
    "comments",
    "chat_messages",
    "activity_log",
)


class RecordStore:
    """Base class for collection storage backends.

    Subclasses implement ``_read`` and ``_write``; the error handling
    contract (swallow and log) lives here so every backend behaves the
    same towards the services.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def load(self, name: str) -> List[Record]:
        """Return the collection ``name`` in storage order.

        Missing, unreadable or malformed storage yields an empty list.
        """
        try:
            records = self._read(name)
        except (OSError, ValueError, sqlite3.Error) as exc:
            logger.error("Error reading collection %s: %s", name, exc)
            return []
        if records is None:
            return []
        if not isinstance(records, list):
            logger.error("Collection %s does not hold a list; treating it as empty", name)
            return []
        return records

    def save(self, name: str, records: List[Record]) -> bool:
        """Overwrite collection ``name`` with ``records``.

        Returns ``True`` on success and ``False`` if the write failed.
        """
        try:
            self._write(name, records)
        except (OSError, TypeError, ValueError, sqlite3.Error) as exc:
            logger.error("Error writing collection %s: %s", name, exc)
            return False
        logger.debug("Saved %d records to %s", len(records), name)
        return True

    def init_storage(self, names: Iterable[str] = COLLECTIONS) -> None:
        """Create every missing collection as an empty sequence."""
        raise NotImplementedError

    def lock(self, name: str) -> threading.RLock:
        """Return the lock guarding collection ``name``."""
        with self._locks_guard:
            if name not in self._locks:
                self._locks[name] = threading.RLock()
            return self._locks[name]

    @contextmanager
    def locked(self, *names: str) -> Iterator[None]:
        """Hold the locks of several collections at once.

        Locks are always taken in sorted name order so that two callers
        locking overlapping sets cannot deadlock.
        """
        ordered = [self.lock(name) for name in sorted(set(names))]
        for lock in ordered:
            lock.acquire()
        try:
            yield
        finally:
            for lock in reversed(ordered):
                lock.release()

    def _read(self, name: str) -> Any:
        raise NotImplementedError

    def _write(self, name: str, records: List[Record]) -> None:
        raise NotImplementedError


class JsonFileRecordStore(RecordStore):
    """Store each collection as ``<data_dir>/<name>.json``."""

    def __init__(self, data_dir: str | Path) -> None:
        super().__init__()
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def init_storage(self, names: Iterable[str] = COLLECTIONS) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for name in names:
            path = self.path_for(name)
            if not path.exists():
                path.write_text("[]", encoding="utf-8")
                logger.info("Initialised empty collection %s at %s", name, path)

    def _read(self, name: str) -> Any:
        with self.path_for(name).open("r", encoding="utf-8") as fh:
            return json.load(fh)

    def _write(self, name: str, records: List[Record]) -> None:
        # Serialise first so an unserialisable record cannot truncate the file.
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        self.path_for(name).write_text(payload, encoding="utf-8")


class SqliteRecordStore(RecordStore):
    """Store every collection as pretty‑printed JSON text in SQLite.

    A connection is opened per operation, as elsewhere in the project;
    SQLite serialises concurrent writers on its own.
    """

    MIGRATIONS: list[tuple[int, str]] = [
        # Migration 1: one row per collection
        (
            1,
            """
            CREATE TABLE IF NOT EXISTS collections (
                name TEXT PRIMARY KEY,
                data TEXT NOT NULL DEFAULT '[]',
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
            """,
        ),
    ]

    def __init__(self, db_path: str | Path) -> None:
        super().__init__()
        self.db_path = str(db_path)

    def get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Context manager that yields a cursor and closes the connection on exit."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def init_storage(self, names: Iterable[str] = COLLECTIONS) -> None:
        with self.get_cursor() as cursor:
            cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in self.MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    current_version = version

            for name in names:
                cursor.execute(
                    "INSERT OR IGNORE INTO collections (name, data) VALUES (?, '[]')",
                    (name,),
                )

    def _read(self, name: str) -> Any:
        with self.get_cursor() as cursor:
            row = cursor.execute("SELECT data FROM collections WHERE name = ?", (name,)).fetchone()
        if row is None:
            return None
        return json.loads(row["data"])

    def _write(self, name: str, records: List[Record]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        with self.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO collections (name, data) VALUES (?, ?)"
                " ON CONFLICT(name) DO UPDATE SET data = excluded.data, updated_at = CURRENT_TIMESTAMP",
                (name, payload),
            )


class MemoryRecordStore(RecordStore):
    """In‑process store, used by the test suite.

    ``failing`` names collections whose saves should fail, which lets
    tests exercise the ``PersistError`` paths without touching disk.
    """

    def __init__(self, initial: Optional[Dict[str, List[Record]]] = None) -> None:
        super().__init__()
        self._data: Dict[str, str] = {}
        self.failing: set[str] = set()
        for name, records in (initial or {}).items():
            self._write(name, records)

    def init_storage(self, names: Iterable[str] = COLLECTIONS) -> None:
        for name in names:
            self._data.setdefault(name, "[]")

    def _read(self, name: str) -> Any:
        if name not in self._data:
            return None
        return json.loads(self._data[name])

    def _write(self, name: str, records: List[Record]) -> None:
        if name in self.failing:
            raise OSError(f"simulated write failure for {name}")
        # Round‑trip through JSON so callers never share state with the store.
        self._data[name] = json.dumps(copy.deepcopy(records))


def resolve_path(value: str) -> Path:
    """Resolve ``value`` against the project root unless it is absolute."""
    if os.path.isabs(value):
        return Path(value)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / value).resolve()


def build_store() -> RecordStore:
    """Build the record store selected by ``settings.storage_backend``."""
    backend = settings.storage_backend
    if backend == "json":
        return JsonFileRecordStore(resolve_path(settings.data_dir))
    if backend == "sqlite":
        return SqliteRecordStore(resolve_path(settings.database_url))
    raise ValueError(f"Unknown storage backend: {backend!r}")


_store: Optional[RecordStore] = None
_store_guard = threading.Lock()


def get_store() -> RecordStore:
    """Return the process‑wide record store.

    Used as a FastAPI dependency by every endpoint; tests override it
    through ``app.dependency_overrides``.
    """
    global _store
    with _store_guard:
        if _store is None:
            _store = build_store()
            logger.info("Using %s record store", settings.storage_backend)
        return _store
