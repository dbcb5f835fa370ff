"""
Exception handlers turning failures into the board's response envelope.

Board errors (duplicate key, full collection, missing record, failed
write) are expected outcomes rather than server faults, so they are
answered with HTTP 200 and ``{"success": false, "message": ...}``.
Bodies missing a required field get HTTP 422 in the same envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from idea_board_api.app.core.errors import BoardError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all envelope error handlers on the FastAPI app."""

    @app.exception_handler(BoardError)
    async def board_error_handler(request: Request, exc: BoardError) -> JSONResponse:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_200_OK, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={
                "success": False,
                "message": "Invalid request body",
                "errors": jsonable_encoder(exc.errors()),
            },
        )
