"""
Idea endpoints for API v1.

Ideas are unique by ``title``.  Besides creation they can be edited
(full replace) and deleted; deleting an idea also removes the funds,
votes, comments and chat messages that reference its title.
"""

from typing import Any, List

from fastapi import APIRouter, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.schemas.idea import IdeaCreate, IdeaDelete, IdeaEdit
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=List[Any])
def list_ideas(services: BoardServices = Depends(get_services)) -> List[Any]:
    """Return all ideas in creation order."""
    return services.ideas.list_records()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
def create_idea(idea: IdeaCreate, services: BoardServices = Depends(get_services)) -> ActionResult:
    """Create a new idea with a title not used by any other idea."""
    services.ideas.append(idea.to_record())
    return ActionResult(success=True)


@router.post("/edit", response_model=ActionResult, response_model_exclude_none=True)
def edit_idea(payload: IdeaEdit, services: BoardServices = Depends(get_services)) -> ActionResult:
    """Replace the idea titled ``oldTitle``.

    The stored idea keeps only ``title`` (from ``newTitle``),
    ``description``, ``creator``, ``category``, ``fundingGoal`` and
    ``status``.
    """
    services.ideas.replace(payload.oldTitle, payload.idea_fields())
    return ActionResult(success=True)


@router.post("/delete", response_model=ActionResult, response_model_exclude_none=True)
def delete_idea(payload: IdeaDelete, services: BoardServices = Depends(get_services)) -> ActionResult:
    """Delete an idea and every record referencing it.

    A failure report may leave the cascade partially applied; repeating
    the request is safe.
    """
    services.ideas.delete_by_title(payload.title)
    return ActionResult(success=True)
