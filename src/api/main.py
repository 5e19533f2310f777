"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_exception_handlers
from src.api.routes import health, listings, messages, upload
from src.config import settings
from src.infrastructure.database.connection import dispose_engine
from src.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("marketplace_api_starting")
    yield
    await dispose_engine()
    logger.info("marketplace_api_stopping")


def create_app() -> FastAPI:
    configure_logging(settings.log_level, json_logs=settings.json_logs)

    app = FastAPI(
        title="Marketplace API",
        description="Listings, buyer/seller messages and listing image uploads.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(listings.router)
    app.include_router(messages.router)
    app.include_router(upload.router)

    return app


app = create_app()
