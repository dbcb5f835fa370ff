"""
Top‑level router for version 1 of the API.

This router aggregates the per‑collection routers.  When a new
collection is introduced, add its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    users,
    ideas,
    funds,
    votes,
    comments,
    chat_messages,
    activity_log,
    analytics,
    health,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(ideas.router, prefix="/ideas", tags=["ideas"])
# Funds are listed at /funds but created at /fund, so the router
# declares both paths itself.
router.include_router(funds.router, tags=["funds"])
router.include_router(votes.router, prefix="/votes", tags=["votes"])
router.include_router(comments.router, prefix="/comments", tags=["comments"])
router.include_router(chat_messages.router, prefix="/chat_messages", tags=["chat_messages"])
router.include_router(activity_log.router, prefix="/activity_log", tags=["activity_log"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
router.include_router(health.router, tags=["health"])
