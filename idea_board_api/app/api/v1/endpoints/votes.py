"""
Vote endpoints for API v1.

Each user may vote for a given idea once.
"""

from typing import Any, List

from fastapi import APIRouter, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.schemas.vote import VoteCreate
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=List[Any])
def list_votes(services: BoardServices = Depends(get_services)) -> List[Any]:
    return services.votes.list_records()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
def cast_vote(vote: VoteCreate, services: BoardServices = Depends(get_services)) -> ActionResult:
    """Cast a vote; a second vote by the same user for the same idea fails."""
    services.votes.append(vote.to_record())
    return ActionResult(success=True)
