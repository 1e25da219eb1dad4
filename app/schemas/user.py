"""Pydantic schemas for user resources."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints

from app.models import MAX_GENDER_CODE, MAX_RECORD_ID, MIN_GENDER_CODE

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
]
CityStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=100),
]


class UserBase(BaseModel):
    user_id: Annotated[int, Field(ge=0, le=MAX_RECORD_ID)]
    name: NameStr
    mail: EmailStr
    city: Optional[CityStr] = None
    gender: Annotated[int, Field(ge=MIN_GENDER_CODE, le=MAX_GENDER_CODE)]
    is_active: bool = True


class UserCreate(UserBase):
    register_date: Optional[datetime] = None


class UserForm(UserBase):
    """Form-encoded input of the create and edit views."""

    # An unchecked checkbox is absent from the submitted form.
    is_active: bool = False
    register_date: Optional[datetime] = None


class UserResponse(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    mail: str
    register_date: datetime


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    mail: str


class BulkCreateResponse(BaseModel):
    created: int


class UserIndexView(BaseModel):
    view: str = "index"
    users: list[UserResponse]


class UserFormView(BaseModel):
    """A create, edit or delete view, re-displayed with errors when an action fails."""

    view: str
    id: Optional[int] = None
    form: dict[str, Any] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
