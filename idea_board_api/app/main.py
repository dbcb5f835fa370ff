"""
Main entrypoint for the Idea Board API.

This module assembles the FastAPI application, sets up logging, CORS
and the envelope error handlers, and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn or another ASGI server, e.g.::

    uvicorn idea_board_api.app.main:app --reload

or use ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import RecordStore, get_store
from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Record store to serve from.  When omitted the process‑wide
        store selected by ``settings.storage_backend`` is used.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules
    # below can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Every collection must exist before the first request is served.
        active_store = store if store is not None else get_store()
        active_store.init_storage()
        logger.info("%s %s ready", settings.project_name, settings.api_version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Clients address resources at the root, so v1 has no prefix.
    app.include_router(v1_router)

    if store is not None:
        app.dependency_overrides[get_store] = lambda: store

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
