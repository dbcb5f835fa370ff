"""
Service layer for ideas.

Ideas are keyed by ``title``.  Besides the generic append, an idea can
be replaced in full by title and deleted by title; deletion cascades
into funds, votes, comments and chat messages (see
``cascade_service``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from idea_board_api.app.core.errors import DuplicateKeyError, NotFoundError, PersistError
from idea_board_api.app.core.storage import Record, RecordStore
from idea_board_api.app.services.cascade_service import CascadeCoordinator
from idea_board_api.app.services.collection_service import MISSING, CollectionService, field_value
from idea_board_api.app.services.policies import CollectionPolicy

logger = logging.getLogger(__name__)

# An edited idea carries these fields and nothing else.
IDEA_FIELDS = ("title", "description", "creator", "category", "fundingGoal", "status")


class IdeaService(CollectionService):
    """Collection service for ideas with replace and cascading delete."""

    def __init__(
        self,
        store: RecordStore,
        policy: CollectionPolicy,
        cascade: Optional[CascadeCoordinator] = None,
    ) -> None:
        super().__init__(store, policy)
        self.cascade = cascade or CascadeCoordinator(store)

    @staticmethod
    def index_of(ideas: List[Record], title: Any) -> Optional[int]:
        for index, idea in enumerate(ideas):
            if field_value(idea, "title", MISSING) == title:
                return index
        return None

    def replace(self, old_title: Any, fields: Dict[str, Any]) -> Record:
        """Overwrite the idea titled ``old_title``.

        The new record is built only from the supplied entries of
        ``IDEA_FIELDS``; any other field of the old record is dropped.
        Renaming onto the title of a different idea is rejected.
        """
        new_idea = {field: fields[field] for field in IDEA_FIELDS if field in fields}
        with self.store.lock(self.name):
            ideas = self.store.load(self.name)
            index = self.index_of(ideas, old_title)
            if index is None:
                raise NotFoundError("Idea not found")
            new_title = new_idea.get("title", MISSING)
            if new_title != old_title and any(
                field_value(idea, "title", MISSING) == new_title
                for position, idea in enumerate(ideas)
                if position != index
            ):
                raise DuplicateKeyError(self.policy.duplicate_message)
            ideas[index] = new_idea
            self._persist(ideas, "Failed to update idea")
        logger.info("Updated idea %r", old_title)
        return new_idea

    def delete_by_title(self, title: Any) -> None:
        """Delete the idea titled ``title`` and everything referencing it.

        Raises ``PersistError`` if any of the five writes failed; the
        writes that did succeed stay applied.
        """
        with self.store.locked(*self.cascade.collections()):
            ideas = self.store.load(self.name)
            index = self.index_of(ideas, title)
            if index is None:
                raise NotFoundError("Idea not found")
            del ideas[index]
            if not self.cascade.purge_idea(title, ideas):
                raise PersistError("Failed to delete idea")
        logger.info("Deleted idea %r", title)
