"""
Cascade of an idea deletion into the collections that reference it.

Funds, votes, comments and chat messages point at an idea through
their ``ideaTitle`` field.  When an idea goes away, every record
pointing at its title is filtered out and all five collections are
written back one after another.  There is no rollback: a failed
write leaves earlier writes applied.  Filtering on a title that is
no longer referenced is a no‑op, so re‑running a failed cascade is
safe.
"""

from __future__ import annotations

import logging
from typing import List

from idea_board_api.app.core.storage import Record, RecordStore
from idea_board_api.app.services.collection_service import MISSING, field_value

logger = logging.getLogger(__name__)

DEPENDENT_COLLECTIONS = ("funds", "votes", "comments", "chat_messages")


class CascadeCoordinator:
    """Remove records that depend on a deleted idea."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def collections(self) -> tuple:
        """Names of every collection a cascade writes to."""
        return ("ideas",) + DEPENDENT_COLLECTIONS

    def purge_idea(self, title: str, remaining_ideas: List[Record]) -> bool:
        """Persist ``remaining_ideas`` and drop records referencing ``title``.

        Returns ``True`` only if all five writes succeeded.  Callers are
        expected to hold the locks of ``collections()``.
        """
        results = [self.store.save("ideas", remaining_ideas)]
        for name in DEPENDENT_COLLECTIONS:
            records = self.store.load(name)
            kept = [record for record in records if field_value(record, "ideaTitle", MISSING) != title]
            removed = len(records) - len(kept)
            ok = self.store.save(name, kept)
            if ok and removed:
                logger.info("Cascade removed %d %s for idea %r", removed, name, title)
            elif not ok:
                logger.error("Cascade could not write %s for idea %r", name, title)
            results.append(ok)
        return all(results)
