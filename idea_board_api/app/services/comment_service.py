"""
Service layer for comments.

Comments have no natural key: they are addressed by their position in
the collection.  Deleting a comment shifts every later comment down by
one, so positions must not be reused across deletes.
"""

from __future__ import annotations

import logging
from typing import Any

from idea_board_api.app.core.errors import NotFoundError
from idea_board_api.app.core.storage import Record
from idea_board_api.app.services.collection_service import CollectionService

logger = logging.getLogger(__name__)


class CommentService(CollectionService):
    """Collection service for comments with positional delete."""

    def delete_at(self, index: Any) -> Record:
        """Remove and return the comment at ``index``.

        Anything other than an integer in ``[0, len)`` is reported as
        ``NotFoundError``.
        """
        with self.store.lock(self.name):
            comments = self.store.load(self.name)
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(comments):
                raise NotFoundError("Comment not found")
            removed = comments.pop(index)
            self._persist(comments, "Failed to delete comment")
        logger.info("Deleted comment at position %d", index)
        return removed
