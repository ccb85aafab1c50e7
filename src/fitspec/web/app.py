"""FastAPI application for the fitspec scoring API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..db.engine import get_db_path, init_db
from .routers import assessments, categories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the history database on startup if it is missing."""
    db_path = get_db_path()
    if not db_path.exists():
        logger.info("Creating database at %s", db_path)
        await init_db(db_path)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="fitspec",
        description="Fitness assessment scoring API",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(categories.router)
    app.include_router(assessments.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
