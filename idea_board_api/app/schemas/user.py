"""
Pydantic models for user payloads.

Users are identified by ``username``; any other profile fields are
stored exactly as sent.
"""

from typing import Any

from pydantic import Field

from .common import LooseRecord


class UserCreate(LooseRecord):
    """Schema for registering a user."""

    username: Any = Field(..., examples=["alice"])
