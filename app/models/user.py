"""SQLAlchemy model for user records."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base

# Opaque comparison constant, no other codes are defined.
MALE_GENDER_CODE = 0b01

# Bounds of the 64-bit id columns and the SmallInteger gender column.
MAX_RECORD_ID = 2**63 - 1
MIN_RECORD_ID = -(2**63)
MIN_GENDER_CODE = -(2**15)
MAX_GENDER_CODE = 2**15 - 1


class User(Base):
    """A registered user."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    user_id: Mapped[int] = mapped_column(BigInteger, unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    mail: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    gender: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    register_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return "User(id={id}, user_id={user_id}, name={name!r})".format(
            id=self.id, user_id=self.user_id, name=self.name
        )
