"""
Error taxonomy for board operations.

Services raise these exceptions when a request cannot be applied.  None
of them is fatal: the API layer converts every ``BoardError`` into the
``{"success": false, "message": ...}`` envelope, and nothing is retried
automatically.
"""


class BoardError(Exception):
    """Base class for failures reported to the caller as an envelope."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"success": False, "message": self.message}


class DuplicateKeyError(BoardError):
    """The record's natural key collides with an existing record."""


class CollectionFullError(BoardError):
    """The collection already holds its maximum number of records."""


class NotFoundError(BoardError):
    """A key or position does not resolve to an existing record."""


class PersistError(BoardError):
    """The underlying durable write failed."""
