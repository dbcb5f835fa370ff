"""
User endpoints for API v1.

Users are unique by ``username``.  There is no authentication: the
board trusts whatever username the client presents.
"""

from typing import Any, List

from fastapi import APIRouter, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.schemas.user import UserCreate
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=List[Any])
def list_users(services: BoardServices = Depends(get_services)) -> List[Any]:
    """Return every registered user in registration order."""
    return services.users.list_records()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
def register_user(user: UserCreate, services: BoardServices = Depends(get_services)) -> ActionResult:
    """Register a new user.

    Fails with "Username already exists" or "User limit reached".
    """
    services.users.append(user.to_record())
    return ActionResult(success=True)
