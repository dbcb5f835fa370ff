"""
Activity log endpoints for API v1.

Clients append free‑form activity entries; the log is unbounded and
never pruned by the server.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=List[Any])
def list_activity(services: BoardServices = Depends(get_services)) -> List[Any]:
    return services.activity_log.list_records()


@router.post("", response_model=ActionResult, response_model_exclude_none=True)
def log_activity(
    entry: Dict[str, Any] = Body(...),
    services: BoardServices = Depends(get_services),
) -> ActionResult:
    services.activity_log.append(entry)
    return ActionResult(success=True)
