"""
Fund (pledge) endpoints for API v1.

Pledges are unbounded and have no key.  Note the asymmetric paths:
pledges are listed at ``/funds`` and created at ``/fund``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.schemas.common import ActionResult
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("/funds", response_model=List[Any])
def list_funds(services: BoardServices = Depends(get_services)) -> List[Any]:
    return services.funds.list_records()


@router.post("/fund", response_model=ActionResult, response_model_exclude_none=True)
def create_fund(
    fund: Dict[str, Any] = Body(...),
    services: BoardServices = Depends(get_services),
) -> ActionResult:
    """Record a pledge towards an idea."""
    services.funds.append(fund)
    return ActionResult(success=True)
