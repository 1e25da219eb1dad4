"""Database configuration for the user query service."""

import logging

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine, sizing the pool only for server databases."""

    if make_url(database_url).get_backend_name() == "sqlite":
        return create_async_engine(database_url, echo=echo)

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

SessionLocal = build_session_factory(engine)


async def create_schema(bind: AsyncEngine) -> None:
    async with bind.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)


async def verify_database_connection(bind: AsyncEngine) -> None:
    """Ensure the service can connect to the configured database."""

    try:
        async with bind.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Database connection validation failed")
        raise RuntimeError("Failed to connect to the users database") from exc


__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "build_session_factory",
    "create_schema",
    "engine",
    "verify_database_connection",
]
