"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server runs out of the box against a local ``data`` directory.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Idea Board API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Which record store backs the collections: ``json`` keeps one
    # pretty‑printed file per collection under ``data_dir``; ``sqlite``
    # keeps every collection as a JSON text row in ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "json").lower()

    # Relative paths are resolved against the project root by the
    # ``storage`` module.
    data_dir: str = os.getenv("DATA_DIR", "data")
    database_url: str = os.getenv("DATABASE_URL", "idea_board.db")

    # Ceiling applied to the bounded collections (users, ideas, votes,
    # comments, chat_messages).  Funds and the activity log are unbounded.
    collection_limit: int = int(os.getenv("COLLECTION_LIMIT", "5000"))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
