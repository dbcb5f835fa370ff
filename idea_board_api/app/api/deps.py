"""
FastAPI dependencies shared by the endpoints.
"""

from fastapi import Depends

from idea_board_api.app.core.storage import RecordStore, get_store
from idea_board_api.app.services.board import BoardServices, build_services


def get_services(store: RecordStore = Depends(get_store)) -> BoardServices:
    """Build the board services around the request's record store."""
    return build_services(store)
