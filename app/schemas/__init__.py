"""Schemas exposed by the user query service."""

from app.schemas.user import (
    BulkCreateResponse,
    UserBase,
    UserCreate,
    UserForm,
    UserFormView,
    UserIndexView,
    UserResponse,
    UserSummary,
)

__all__ = [
    "BulkCreateResponse",
    "UserBase",
    "UserCreate",
    "UserForm",
    "UserFormView",
    "UserIndexView",
    "UserResponse",
    "UserSummary",
]
