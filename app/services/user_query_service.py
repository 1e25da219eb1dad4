"""Read and bulk-write operations over user records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from sqlalchemy import Row, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User
from app.repository import (
    active_male_users_registered_today,
    active_users_query,
    add_users,
    fetch_untracked,
    find_first_user_by_user_id,
    list_active_user_contacts,
)
from app.schemas import UserBase

logger = logging.getLogger(__name__)


def build_user(data: UserBase) -> User:
    """Create a transient ``User`` from validated input.

    Unset optional values are left to the column defaults.
    """

    return User(**data.model_dump(exclude_none=True))


class UserQueryService:
    """Service layer for querying and bulk-creating users.

    Store errors are not recovered here. Failed writes roll the session back
    and re-raise the original exception for the caller to translate.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_active_users(self) -> list[Row[tuple[str, str]]]:
        contacts = await list_active_user_contacts(self.db)
        logger.debug("Loaded %d active user contacts", len(contacts))
        return contacts

    async def create_users(self, users: Sequence[User]) -> int:
        if not users:
            return 0

        add_users(self.db, users)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            logger.warning("Rejected batch of %d users", len(users))
            raise
        except Exception:
            await self.db.rollback()
            logger.exception("Unexpected error while creating %d users", len(users))
            raise

        logger.info("Created %d users", len(users))
        return len(users)

    async def find_active_males_registered_today(self) -> list[User]:
        statement = select(User).where(active_male_users_registered_today()).order_by(User.id)
        return await fetch_untracked(self.db, statement)

    async def find_user_by_external_id(self, user_id: int) -> Optional[User]:
        user = await find_first_user_by_user_id(self.db, user_id)
        if user is None:
            logger.debug("No user with user_id=%s", user_id)
        return user

    async def list_active_users_alt(self) -> list[User]:
        query = active_users_query()
        return await fetch_untracked(self.db, query)
