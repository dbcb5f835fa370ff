"""
Assembly of the board's services around one record store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from idea_board_api.app.core.storage import RecordStore
from idea_board_api.app.services.analytics_service import AnalyticsService
from idea_board_api.app.services.cascade_service import CascadeCoordinator
from idea_board_api.app.services.collection_service import CollectionService
from idea_board_api.app.services.comment_service import CommentService
from idea_board_api.app.services.idea_service import IdeaService
from idea_board_api.app.services.policies import default_policies


@dataclass
class BoardServices:
    """Every service the API needs, sharing a single store."""

    users: CollectionService
    ideas: IdeaService
    funds: CollectionService
    votes: CollectionService
    comments: CommentService
    chat_messages: CollectionService
    activity_log: CollectionService
    analytics: AnalyticsService

    def collection(self, name: str) -> CollectionService:
        return getattr(self, name)


def build_services(store: RecordStore, limit: Optional[int] = None) -> BoardServices:
    """Build the services for ``store``.

    ``limit`` overrides the ceiling of bounded collections.
    """
    policies: Dict = default_policies(limit)
    return BoardServices(
        users=CollectionService(store, policies["users"]),
        ideas=IdeaService(store, policies["ideas"], CascadeCoordinator(store)),
        funds=CollectionService(store, policies["funds"]),
        votes=CollectionService(store, policies["votes"]),
        comments=CommentService(store, policies["comments"]),
        chat_messages=CollectionService(store, policies["chat_messages"]),
        activity_log=CollectionService(store, policies["activity_log"]),
        analytics=AnalyticsService(store),
    )
