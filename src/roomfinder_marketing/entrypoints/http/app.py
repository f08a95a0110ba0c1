import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from roomfinder_marketing.entrypoints.http.exception_handlers import register_exception_handlers
from roomfinder_marketing.entrypoints.http.routes.health import router as health_router
from roomfinder_marketing.entrypoints.http.routes.posts import router as posts_router
from roomfinder_marketing.entrypoints.http.routes.search import router as search_router
from roomfinder_marketing.infra.config import configure_logging
from roomfinder_marketing.infra.db.session import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    yield
    logger.info("Shutting down, closing database connections")
    dispose_engine()


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Roomfinder Marketing API",
        description="""
        Listing browse and search API for the room rental and sale platform.

        ## Features
        - Paginated listings: all, featured, promotional, by district, by type
        - Combined filters and keyword search
        - The caller's own posts by status

        ## Responses
        Every response is an envelope: `success`, `data`, `error`.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(posts_router)
    app.include_router(search_router)

    return app


app = build_app()
