"""SQLAlchemy models for the user query service."""

from .user import (
    MALE_GENDER_CODE,
    MAX_GENDER_CODE,
    MAX_RECORD_ID,
    MIN_GENDER_CODE,
    MIN_RECORD_ID,
    User,
)

__all__ = [
    "MALE_GENDER_CODE",
    "MAX_GENDER_CODE",
    "MAX_RECORD_ID",
    "MIN_GENDER_CODE",
    "MIN_RECORD_ID",
    "User",
]
