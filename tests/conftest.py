from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.database import build_engine, build_session_factory, create_schema
from app.main import create_app
from app.models import MALE_GENDER_CODE, User


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'users.sqlite3'}"


@pytest.fixture()
async def engine(database_url: str):
    engine = build_engine(database_url)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture()
def client(database_url: str):
    app = create_app(build_engine(database_url))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user():
    def _make_user(
        user_id: int,
        *,
        name: str | None = None,
        is_active: bool = True,
        gender: int = MALE_GENDER_CODE,
        register_date: datetime | None = None,
        city: str | None = "Lima",
    ) -> User:
        name = name or f"User {user_id}"
        return User(
            user_id=user_id,
            name=name,
            mail=f"user{user_id}@example.com",
            city=city,
            gender=gender,
            is_active=is_active,
            register_date=register_date or datetime.now(),
        )

    return _make_user
