"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, quest_api.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quest_api.boundary.db.connection import get_async_engine
from quest_api.configs import get_settings
from quest_api.observability import configure_logging
from quest_api.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    challenges_router,
    images_router,
    me_router,
    quests_router,
    root_router,
    users_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")
    logger.info("Starting Quest API (%s)", settings.environment)

    yield

    # Dispose the engine only if a request created it.
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Quest API",
        description="Quest and challenge tracking service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(root_router)
    app.include_router(users_router)
    app.include_router(quests_router)
    app.include_router(challenges_router)
    app.include_router(me_router)
    app.include_router(images_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "quest_api.api.main:app",
        host="0.0.0.0",
        port=get_settings().port,
    )
