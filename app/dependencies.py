"""Common dependencies for the user query service."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Provide a request-scoped session."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        await db.close()


__all__ = ["get_db"]
