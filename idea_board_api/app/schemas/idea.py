"""
Pydantic schemas for ideas.

Creating an idea only requires its ``title``.  Editing addresses the
idea by ``oldTitle`` and replaces it with the six idea fields, the
title being supplied as ``newTitle``.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .common import LooseRecord


class IdeaCreate(LooseRecord):
    """Schema for creating a new idea."""

    title: Any = Field(..., examples=["Community garden"])


class IdeaEdit(BaseModel):
    """Schema for replacing an existing idea.

    Only fields present in the request are carried over to the new
    record; anything else the old idea held is dropped.
    """

    oldTitle: Any = Field(..., description="Title of the idea to replace")
    newTitle: Optional[Any] = None
    description: Optional[Any] = None
    creator: Optional[Any] = None
    category: Optional[Any] = None
    fundingGoal: Optional[Any] = None
    status: Optional[Any] = None

    def idea_fields(self) -> Dict[str, Any]:
        """Return the supplied fields keyed as stored on an idea."""
        supplied = self.model_dump(exclude_unset=True)
        supplied.pop("oldTitle", None)
        if "newTitle" in supplied:
            supplied["title"] = supplied.pop("newTitle")
        return supplied


class IdeaDelete(BaseModel):
    """Schema for deleting an idea by title."""

    title: Any = Field(...)
