"""Ideas: replace by title and cascading delete.

Invariants:
    - An edited idea keeps only the six idea fields that were supplied
    - Deleting an idea removes every fund/vote/comment/chat message with its title
    - A second delete of the same title fails with NotFound and changes nothing
    - A failed cascade write is reported; successful writes stay applied
"""

import pytest

from idea_board_api.app.core.errors import DuplicateKeyError, NotFoundError, PersistError


@pytest.fixture
def seeded(services):
    services.ideas.append({"title": "X", "fundingGoal": 100, "tags": ["a"]})
    services.ideas.append({"title": "Y", "fundingGoal": 50})
    for title in ("X", "Y"):
        services.funds.append({"ideaTitle": title, "amount": 10})
        services.votes.append({"username": "u1", "ideaTitle": title})
        services.comments.append({"ideaTitle": title, "text": "hi"})
        services.chat_messages.append({"ideaTitle": title, "text": "yo"})
    return services


def test_replace_drops_unknown_fields(seeded):
    seeded.ideas.replace("X", {"title": "X2", "description": "d", "fundingGoal": 200, "extra": 1})
    assert seeded.ideas.list_records()[0] == {"title": "X2", "description": "d", "fundingGoal": 200}


def test_replace_keeps_position(seeded):
    seeded.ideas.replace("Y", {"title": "Y", "status": "funded"})
    assert [idea["title"] for idea in seeded.ideas.list_records()] == ["X", "Y"]
    assert seeded.ideas.list_records()[1] == {"title": "Y", "status": "funded"}


def test_replace_missing_idea(seeded):
    with pytest.raises(NotFoundError) as exc_info:
        seeded.ideas.replace("nope", {"title": "Z"})
    assert exc_info.value.message == "Idea not found"


def test_replace_onto_another_title_is_rejected(seeded):
    before = seeded.ideas.list_records()
    with pytest.raises(DuplicateKeyError):
        seeded.ideas.replace("X", {"title": "Y"})
    assert seeded.ideas.list_records() == before


def test_replace_persist_failure(store, seeded):
    store.failing.add("ideas")
    with pytest.raises(PersistError) as exc_info:
        seeded.ideas.replace("X", {"title": "X"})
    assert exc_info.value.message == "Failed to update idea"


def test_delete_cascades(seeded):
    seeded.ideas.delete_by_title("X")

    assert [idea["title"] for idea in seeded.ideas.list_records()] == ["Y"]
    for name in ("funds", "votes", "comments", "chat_messages"):
        records = seeded.collection(name).list_records()
        assert [record["ideaTitle"] for record in records] == ["Y"]


def test_delete_twice_is_not_found_and_changes_nothing(seeded):
    seeded.ideas.delete_by_title("X")
    after_first = {name: seeded.collection(name).list_records() for name in ("funds", "votes", "comments", "chat_messages")}

    with pytest.raises(NotFoundError):
        seeded.ideas.delete_by_title("X")

    for name, records in after_first.items():
        assert seeded.collection(name).list_records() == records


def test_delete_leaves_unrelated_collections(seeded):
    seeded.users.append({"username": "u1"})
    seeded.activity_log.append({"ideaTitle": "X", "action": "created"})
    seeded.ideas.delete_by_title("X")
    assert seeded.users.list_records() == [{"username": "u1"}]
    assert seeded.activity_log.list_records() == [{"ideaTitle": "X", "action": "created"}]


def test_partial_cascade_failure(store, seeded):
    store.failing.add("votes")

    with pytest.raises(PersistError) as exc_info:
        seeded.ideas.delete_by_title("X")

    assert exc_info.value.message == "Failed to delete idea"
    assert [idea["title"] for idea in seeded.ideas.list_records()] == ["Y"]
    assert [fund["ideaTitle"] for fund in seeded.funds.list_records()] == ["Y"]
    assert [vote["ideaTitle"] for vote in seeded.votes.list_records()] == ["X", "Y"]
    assert [message["ideaTitle"] for message in seeded.chat_messages.list_records()] == ["Y"]


def test_cascade_rerun_is_idempotent(store, seeded):
    remaining = [idea for idea in seeded.ideas.list_records() if idea["title"] != "X"]
    assert seeded.ideas.cascade.purge_idea("X", remaining)
    snapshot = seeded.analytics.snapshot()
    assert seeded.ideas.cascade.purge_idea("X", remaining)
    assert seeded.analytics.snapshot() == snapshot


def test_null_title_does_not_match_missing_title(services):
    services.ideas.append({"title": "X"})
    services.ideas.replace("X", {"description": "untitled now"})
    services.funds.append({"amount": 5})
    services.chat_messages.append({"text": "general chat"})

    with pytest.raises(NotFoundError):
        services.ideas.delete_by_title(None)

    assert services.ideas.list_records() == [{"description": "untitled now"}]
    assert services.funds.list_records() == [{"amount": 5}]
    assert services.chat_messages.list_records() == [{"text": "general chat"}]


def test_null_title_matches_explicit_null(services):
    services.ideas.append({"title": None})
    services.funds.append({"ideaTitle": None, "amount": 1})
    services.funds.append({"amount": 2})

    services.ideas.delete_by_title(None)

    assert services.ideas.list_records() == []
    assert services.funds.list_records() == [{"amount": 2}]


def test_replace_with_null_old_title_skips_untitled_idea(services):
    services.ideas.append({"description": "no title"})
    with pytest.raises(NotFoundError):
        services.ideas.replace(None, {"title": "Z"})
