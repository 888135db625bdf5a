"""Application factory.

Run with:
    uvicorn private_markets.main:create_app --factory
or:
    python -m private_markets
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from private_markets.api import api_router, register_exception_handlers
from private_markets.core.config import Settings, get_settings
from private_markets.core.logging import setup_logging
from private_markets.db import Database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    The Database (connection pool) is created and opened when the app starts
    and disposed when it shuts down; handlers reach it via app.state.

    Args:
        settings: Explicit settings; loaded from the environment when omitted
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
        database = Database.from_settings(settings)
        database.open()
        app.state.database = database
        try:
            yield
        finally:
            logger.info("Shutting down gracefully...")
            database.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Funds, investors, investments and fund analytics",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.ENVIRONMENT != "test":
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
            return response

    register_exception_handlers(app)
    app.include_router(api_router)

    return app
