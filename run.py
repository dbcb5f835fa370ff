"""Entry point for the Idea Board API server.

Starts the FastAPI application under Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``settings`` (defaults ``0.0.0.0`` and ``3000``).  Data location and
storage backend are configured the same way; see
``idea_board_api/app/core/config.py``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from idea_board_api.app.core.config import settings
from idea_board_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://%s:%d", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
