"""Data access helpers for users.

Statements are built here as plain SQLAlchemy ``Select`` values and only
executed when awaited against a session, so callers can assemble a query in
one place and materialize it in another.

Reads meant for display are *untracked*: either they select bare columns
(rows never enter the identity map) or the entities a read brings into the
session are expunged right after loading, so a later flush never writes them back.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time
from typing import Optional

from sqlalchemy import ColumnElement, Row, Select, and_, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import MALE_GENDER_CODE, MAX_RECORD_ID, MIN_RECORD_ID, User


def start_of_day(day: Optional[date] = None) -> datetime:
    """Local midnight of ``day``, today when omitted."""

    return datetime.combine(day or date.today(), time.min)


def active_male_users_registered_today(
    today: Optional[date] = None,
) -> ColumnElement[bool]:
    """Active male users whose registration falls on or after the start of ``today``."""

    return and_(
        User.is_active.is_(True),
        User.gender == MALE_GENDER_CODE,
        User.register_date >= start_of_day(today),
    )


def active_users_query() -> Select[tuple[User]]:
    return select(User).where(User.is_active.is_(True)).order_by(User.id)


def active_user_contacts_query() -> Select[tuple[str, str]]:
    return (
        select(User.name, User.mail)
        .where(User.is_active.is_(True))
        .order_by(User.id)
    )


def _is_storable_id(value: int) -> bool:
    return MIN_RECORD_ID <= value <= MAX_RECORD_ID


def _detach_loaded(db: AsyncSession, users: Iterable[User], tracked: set) -> None:
    # Entities the session held before the read stay tracked, pending changes included.
    for user in users:
        if inspect(user).identity_key not in tracked:
            db.expunge(user)


async def fetch_untracked(db: AsyncSession, statement: Select) -> list[User]:
    """Load entities and detach the ones this read brought into the session."""

    tracked = set(db.identity_map.keys())
    users = list((await db.scalars(statement)).all())
    _detach_loaded(db, users, tracked)
    return users


async def list_active_user_contacts(db: AsyncSession) -> list[Row[tuple[str, str]]]:
    result = await db.execute(active_user_contacts_query())
    return list(result.all())


async def list_users(db: AsyncSession) -> list[User]:
    return await fetch_untracked(db, select(User).order_by(User.id))


async def find_first_user_by_user_id(db: AsyncSession, user_id: int) -> Optional[User]:
    if not _is_storable_id(user_id):
        return None

    tracked = set(db.identity_map.keys())
    statement = select(User).where(User.user_id == user_id).limit(1)
    user = (await db.scalars(statement)).first()
    if user is not None:
        _detach_loaded(db, [user], tracked)
    return user


async def get_user_for_update(db: AsyncSession, record_id: int) -> Optional[User]:
    # Tracked: changes made to the returned entity are flushed on commit.
    if not _is_storable_id(record_id):
        return None
    return await db.get(User, record_id)


def add_user(db: AsyncSession, user: User) -> User:
    db.add(user)
    return user


def add_users(db: AsyncSession, users: Iterable[User]) -> None:
    db.add_all(users)


async def delete_user(db: AsyncSession, user: User) -> None:
    await db.delete(user)
