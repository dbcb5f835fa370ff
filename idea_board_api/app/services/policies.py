"""
Per‑collection rules.

A ``CollectionPolicy`` describes what differs between the board's
collections: the natural key that must stay unique, the size ceiling
and the messages reported when an append is rejected.  The generic
``CollectionService`` applies whichever policy it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from idea_board_api.app.core.config import settings


@dataclass(frozen=True)
class CollectionPolicy:
    """Rules applied to one collection."""

    name: str
    label: str
    key_fields: Tuple[str, ...] = ()
    max_size: Optional[int] = None
    duplicate_message: str = ""

    @property
    def full_message(self) -> str:
        return f"{self.label} limit reached"

    @property
    def save_failed_message(self) -> str:
        return f"Failed to save {self.label.lower()}"


def default_policies(limit: Optional[int] = None) -> Dict[str, CollectionPolicy]:
    """Return the policies of the seven board collections keyed by name.

    ``limit`` overrides the ceiling of the bounded collections and
    defaults to ``settings.collection_limit``.
    """
    ceiling = settings.collection_limit if limit is None else limit
    policies = [
        CollectionPolicy(
            "users", "User", key_fields=("username",), max_size=ceiling,
            duplicate_message="Username already exists",
        ),
        CollectionPolicy(
            "ideas", "Idea", key_fields=("title",), max_size=ceiling,
            duplicate_message="Idea title already exists",
        ),
        CollectionPolicy("funds", "Fund"),
        CollectionPolicy(
            "votes", "Vote", key_fields=("username", "ideaTitle"), max_size=ceiling,
            duplicate_message="You have already voted",
        ),
        CollectionPolicy("comments", "Comment", max_size=ceiling),
        CollectionPolicy("chat_messages", "Chat message", max_size=ceiling),
        CollectionPolicy("activity_log", "Activity log"),
    ]
    return {policy.name: policy for policy in policies}
