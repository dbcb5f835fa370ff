"""
Pydantic schema for comment deletion.

Comments are addressed by position in the collection.
"""

from pydantic import BaseModel, Field


class CommentDelete(BaseModel):
    """Schema for deleting a comment by position."""

    index: int = Field(..., description="Zero‑based position of the comment")
