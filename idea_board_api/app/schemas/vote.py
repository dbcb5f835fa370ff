"""
Pydantic schema for votes.

A user may vote for a given idea only once, so both halves of the
``(username, ideaTitle)`` key must be present.
"""

from typing import Any

from pydantic import Field

from .common import LooseRecord


class VoteCreate(LooseRecord):
    """Schema for casting a vote."""

    username: Any = Field(..., examples=["alice"])
    ideaTitle: Any = Field(..., examples=["Community garden"])
