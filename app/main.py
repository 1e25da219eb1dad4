"""Entry point for the user query service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from app.api import v1_router
from app.core.config import settings
from app.core.database import (
    build_session_factory,
    create_schema,
    engine as default_engine,
    verify_database_connection,
)
from app.core.error_handlers import register_exception_handlers
from app.core.logging_config import setup_logging

# Registers the mapped tables on Base.metadata.
from app import models  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Build the application around ``engine``, the configured one by default."""

    setup_logging(settings.LOG_LEVEL)
    bind = engine or default_engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await verify_database_connection(bind)
        await create_schema(bind)
        logger.info("%s ready", settings.PROJECT_NAME)
        yield
        await bind.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.session_factory = build_session_factory(bind)

    register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


app = create_app()


__all__ = ["app", "create_app"]
