"""
Analytics endpoints for API v1.

``GET /analytics`` returns the raw contents of every collection;
``GET /analytics/summary`` returns counts and per‑idea totals.
Neither view is taken atomically across collections.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from idea_board_api.app.api.deps import get_services
from idea_board_api.app.services.board import BoardServices

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def snapshot(services: BoardServices = Depends(get_services)) -> Dict[str, Any]:
    """Return all seven collections keyed ``users``, ``ideas``, ``funds``,
    ``votes``, ``comments``, ``chatMessages`` and ``activityLog``."""
    return services.analytics.snapshot()


@router.get("/summary", response_model=Dict[str, Any])
def summary(services: BoardServices = Depends(get_services)) -> Dict[str, Any]:
    return services.analytics.summary()
