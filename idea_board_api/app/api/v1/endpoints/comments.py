"""
Comment endpoints for API v1.

Comments are addressed by position.  Clients should re‑fetch the list
after a delete because later comments shift down by one.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.comment import CommentDelete
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=List[Any])
def list_comments(services: BoardServices = Depends(get_services)) -> List[Any]:
    return services.comments.list_records()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
def create_comment(
    comment: Dict[str, Any] = Body(...),
    services: BoardServices = Depends(get_services),
) -> ActionResult:
    services.comments.append(comment)
    return ActionResult(success=True)


@router.post("/delete", response_model=ActionResult, response_model_exclude_none=True)
def delete_comment(payload: CommentDelete, services: BoardServices = Depends(get_services)) -> ActionResult:
    """Delete the comment at ``index``."""
    services.comments.delete_at(payload.index)
    return ActionResult(success=True)
