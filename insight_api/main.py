"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from insight_api.config import get_settings
from insight_api.infrastructure.database import close_mongo_client, ping_database
from insight_api.infrastructure.logging.log_config import setup_logging
from insight_api.presentation.api.errors import register_exception_handlers
from insight_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: verify the MongoDB connection, close it on shutdown."""
    setup_logging()

    # Startup fails when the store is unreachable.
    try:
        await ping_database()
    except PyMongoError:
        logger.exception("MongoDB connection error")
        await close_mongo_client()
        raise

    yield

    await close_mongo_client()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "insight_api.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
