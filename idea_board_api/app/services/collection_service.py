"""
Generic append/list service for a single collection.

Every mutating call follows the same sequence while holding the
collection's lock: load the whole collection, check the policy,
mutate the in‑memory copy and write the whole collection back.  A
rejected or failed call leaves the stored collection untouched.

Services are synchronous instance methods so that FastAPI runs the
endpoints in its threadpool, where the per‑collection locks serialise
concurrent requests.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from idea_board_api.app.core.errors import CollectionFullError, DuplicateKeyError, PersistError
from idea_board_api.app.core.storage import Record, RecordStore
from idea_board_api.app.services.policies import CollectionPolicy

logger = logging.getLogger(__name__)


# Stands in for an absent field; compares equal to nothing but itself.
MISSING = object()


def field_value(record: Any, field: str, default: Any = None) -> Any:
    """Return ``record[field]``, or ``default`` if absent or not a mapping.

    Hand‑edited data files may contain entries that are not objects;
    those are treated as lacking every field.  Pass ``MISSING`` as
    ``default`` when an absent field must not match an explicit
    ``null``.
    """
    if isinstance(record, dict):
        return record.get(field, default)
    return default


class CollectionService:
    """Service enforcing a ``CollectionPolicy`` on top of a record store."""

    def __init__(self, store: RecordStore, policy: CollectionPolicy) -> None:
        self.store = store
        self.policy = policy

    @property
    def name(self) -> str:
        return self.policy.name

    def list_records(self) -> List[Record]:
        """Return the full collection in insertion order."""
        return self.store.load(self.name)

    def key_of(self, record: Any) -> Optional[Tuple[Any, ...]]:
        if not self.policy.key_fields:
            return None
        return tuple(field_value(record, field) for field in self.policy.key_fields)

    def append(self, record: Record) -> Record:
        """Append ``record`` after the uniqueness and capacity checks.

        Raises
        ------
        DuplicateKeyError
            Another record already carries the same natural key.
        CollectionFullError
            The collection already holds ``max_size`` records.
        PersistError
            The collection could not be written back.
        """
        with self.store.lock(self.name):
            records = self.store.load(self.name)
            self._check_unique(records, record)
            self._check_capacity(records)
            records.append(record)
            self._persist(records, self.policy.save_failed_message)
        logger.info("Appended record to %s (%d total)", self.name, len(records))
        return record

    def _check_unique(self, records: List[Record], record: Record) -> None:
        key = self.key_of(record)
        if key is None:
            return
        if any(self.key_of(existing) == key for existing in records):
            logger.info("Rejected duplicate %s key %r", self.name, key)
            raise DuplicateKeyError(self.policy.duplicate_message)

    def _check_capacity(self, records: List[Record]) -> None:
        max_size = self.policy.max_size
        if max_size is not None and len(records) >= max_size:
            logger.warning("Collection %s is full (%d records)", self.name, len(records))
            raise CollectionFullError(self.policy.full_message)

    def _persist(self, records: List[Record], failure_message: str) -> None:
        if not self.store.save(self.name, records):
            raise PersistError(failure_message)
