"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from parrot.api.routes import defaults, entries, health, language
from parrot.controller import Parrot, get_parrot
from parrot.utilities.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    yield


def create_app(parrot: Parrot | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        parrot: Engine to serve; defaults to the process-wide instance
    """
    app = FastAPI(
        title="Parrot API",
        description="Localized text resolution service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.parrot = parrot or get_parrot()

    app.include_router(health.router, tags=["Health"])
    app.include_router(language.router, prefix="/api/v1", tags=["Language"])
    app.include_router(entries.router, prefix="/api/v1", tags=["Entries"])
    app.include_router(defaults.router, prefix="/api/v1", tags=["Defaults"])

    return app
