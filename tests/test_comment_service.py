"""Comments: positional delete."""

import pytest

from idea_board_api.app.core.errors import NotFoundError, PersistError


@pytest.fixture
def comments(services):
    for text in ("a", "b", "c"):
        services.comments.append({"text": text})
    return services.comments


def test_delete_shifts_positions(comments):
    comments.delete_at(1)
    assert comments.list_records() == [{"text": "a"}, {"text": "c"}]
    comments.delete_at(1)
    assert comments.list_records() == [{"text": "a"}]


def test_delete_returns_removed_comment(comments):
    assert comments.delete_at(0) == {"text": "a"}


@pytest.mark.parametrize("index", [-1, 3, 10, True, "1", None])
def test_delete_out_of_bounds(comments, index):
    with pytest.raises(NotFoundError) as exc_info:
        comments.delete_at(index)
    assert exc_info.value.message == "Comment not found"
    assert len(comments.list_records()) == 3


def test_delete_persist_failure(store, comments):
    store.failing.add("comments")
    with pytest.raises(PersistError) as exc_info:
        comments.delete_at(0)
    assert exc_info.value.message == "Failed to delete comment"
