"""
Service layer for analytics.

``snapshot`` returns the raw contents of all seven collections for
consumption by dashboards.  The collections are loaded one after
another without a common lock, so a snapshot taken during a cascade
may briefly show a fund whose idea is already gone.

``summary`` derives a few aggregates from the same data: record counts
per collection and, per idea title, the number of votes and the total
pledged amount.
"""

from __future__ import annotations

from typing import Any, Dict, List

from idea_board_api.app.core.storage import Record, RecordStore
from idea_board_api.app.services.collection_service import field_value

# Response key for each stored collection.
SNAPSHOT_KEYS = {
    "users": "users",
    "ideas": "ideas",
    "funds": "funds",
    "votes": "votes",
    "comments": "comments",
    "chatMessages": "chat_messages",
    "activityLog": "activity_log",
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _group_key(value: Any) -> Any:
    """Return ``value`` if per‑idea totals can be grouped under it, else ``None``.

    Titles are caller‑supplied and may be lists or objects; only string
    and numeric titles are aggregated.
    """
    if isinstance(value, str) or _is_number(value):
        return value
    return None


class AnalyticsService:
    """Read‑only views across every collection."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def snapshot(self) -> Dict[str, List[Record]]:
        return {key: self.store.load(name) for key, name in SNAPSHOT_KEYS.items()}

    def summary(self) -> Dict[str, Any]:
        data = self.snapshot()
        counts = {key: len(records) for key, records in data.items()}

        pledged: Dict[str, float] = {}
        for fund in data["funds"]:
            title = _group_key(field_value(fund, "ideaTitle"))
            amount = field_value(fund, "amount")
            if title is None or not _is_number(amount):
                continue
            pledged[title] = pledged.get(title, 0) + amount

        votes: Dict[str, int] = {}
        for vote in data["votes"]:
            title = _group_key(field_value(vote, "ideaTitle"))
            if title is not None:
                votes[title] = votes.get(title, 0) + 1

        ideas = []
        for idea in data["ideas"]:
            title = field_value(idea, "title")
            key = _group_key(title)
            ideas.append(
                {
                    "title": title,
                    "fundingGoal": field_value(idea, "fundingGoal"),
                    "pledged": pledged.get(key, 0),
                    "votes": votes.get(key, 0),
                }
            )
        return {"counts": counts, "ideas": ideas}
