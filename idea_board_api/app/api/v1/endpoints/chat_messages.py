"""
Chat message endpoints for API v1.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=List[Any])
def list_chat_messages(services: BoardServices = Depends(get_services)) -> List[Any]:
    return services.chat_messages.list_records()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
def post_chat_message(
    message: Dict[str, Any] = Body(...),
    services: BoardServices = Depends(get_services),
) -> ActionResult:
    services.chat_messages.append(message)
    return ActionResult(success=True)
