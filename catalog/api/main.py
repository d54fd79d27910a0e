"""
FastAPI application entry point for the Catalog API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog import __version__
from catalog.api.config import (
    get_api_host,
    get_api_port,
    get_database_path,
    get_log_file,
    get_log_level,
    get_sql_echo,
)
from catalog.api.routers import entities, system
from catalog.database.init_db import init_database
from catalog.database.store import CatalogStore
from catalog.service import CatalogService
from catalog.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


def create_app(db_path: Optional[str] = None) -> FastAPI:
    """
    Build the application with its own database, store and service.

    Args:
        db_path: SQLite file path or ":memory:"; defaults to DATABASE_URL

    Returns:
        Configured FastAPI application
    """
    db_manager = init_database(db_path=db_path or get_database_path(), echo=get_sql_echo())
    store = CatalogStore(db_manager)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        db_manager.close()

    app = FastAPI(
        title="Book & Movie Catalog API",
        description="CRUD and search over books, movies, authors, directors and genres",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_manager = db_manager
    app.state.catalog_service = CatalogService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in entities.routers:
        app.include_router(router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Book & Movie Catalog API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


def main() -> None:
    """Run the API with uvicorn using host/port from the environment."""
    import uvicorn

    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    app = create_app()
    logger.info("Starting Catalog API on %s:%d", get_api_host(), get_api_port())
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    main()
