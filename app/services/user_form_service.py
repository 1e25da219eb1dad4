"""Form-driven create, edit and delete actions on single user records."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User
from app.repository import (
    add_user,
    delete_user,
    get_user_for_update,
    list_users,
)
from app.schemas import UserForm
from app.services.user_query_service import build_user

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when an edit or delete targets a record that does not exist."""

    def __init__(self, record_id: int):
        super().__init__(f"User {record_id} not found")
        self.record_id = record_id


class UserFormService:
    """Service layer for the single-record create, edit and delete forms."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> list[User]:
        return await list_users(self.db)

    async def get_user(self, record_id: int) -> Optional[User]:
        return await get_user_for_update(self.db, record_id)

    async def create_user(self, form: UserForm) -> User:
        user = add_user(self.db, build_user(form))
        await self._commit("create user")
        logger.info("Created user %s (user_id=%s)", user.id, user.user_id)
        return user

    async def update_user(self, record_id: int, form: UserForm) -> User:
        user = await get_user_for_update(self.db, record_id)
        if user is None:
            raise UserNotFoundError(record_id)

        for field, value in form.model_dump(exclude_none=True).items():
            setattr(user, field, value)
        await self._commit(f"update user {record_id}")
        logger.info("Updated user %s", record_id)
        return user

    async def delete_user(self, record_id: int) -> None:
        user = await get_user_for_update(self.db, record_id)
        if user is None:
            raise UserNotFoundError(record_id)

        await delete_user(self.db, user)
        await self._commit(f"delete user {record_id}")
        logger.info("Deleted user %s", record_id)

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            logger.warning("Failed to %s", action)
            raise
        except Exception:
            await self.db.rollback()
            logger.exception("Unexpected error while trying to %s", action)
            raise
