"""Form-driven routes for creating, editing and deleting single users.

A successful action redirects to the index view. A failed one re-displays
the view it was submitted from, echoing the submitted values.
"""

from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.error_handlers import format_validation_errors
from app.dependencies import get_db
from app.models import MAX_RECORD_ID
from app.schemas import UserForm, UserFormView, UserIndexView, UserResponse
from app.services import UserFormService, UserNotFoundError

router = APIRouter(prefix="/users", tags=["user forms"])

RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


def _redirect_to_index(request: Request) -> RedirectResponse:
    return RedirectResponse(
        str(request.url_for("user_index")), status_code=status.HTTP_303_SEE_OTHER
    )


def _render(
    view: str,
    *,
    record_id: Optional[int] = None,
    form: Optional[dict[str, Any]] = None,
    errors: Optional[list[str]] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    payload = UserFormView(view=view, id=record_id, form=form or {}, errors=errors or [])
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def _redisplay(
    view: str, form: dict[str, Any], error: str, record_id: Optional[int] = None
) -> JSONResponse:
    return _render(
        view,
        record_id=record_id,
        form=form,
        errors=[error],
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _load_form(request: Request) -> dict[str, Any]:
    submitted = await request.form()
    return {key: value for key, value in submitted.items() if isinstance(value, str)}


async def _existing_user_form(service: UserFormService, record_id: int) -> dict[str, Any]:
    user = await service.get_user(record_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {record_id} not found",
        )
    return UserResponse.model_validate(user).model_dump(mode="json")


@router.get("", name="user_index", response_model=UserIndexView)
async def index(db: AsyncSession = Depends(get_db)):
    service = UserFormService(db)
    users = await service.list_users()
    return UserIndexView(users=[UserResponse.model_validate(user) for user in users])


@router.get("/create")
async def create_view():
    return _render("create")


@router.post("/create")
async def create(request: Request, db: AsyncSession = Depends(get_db)):
    form_data = await _load_form(request)
    service = UserFormService(db)
    try:
        await service.create_user(UserForm.model_validate(form_data))
    except ValidationError as exc:
        return _redisplay("create", form_data, format_validation_errors(exc.errors()))
    except SQLAlchemyError:
        return _redisplay("create", form_data, "Failed to create user")
    return _redirect_to_index(request)


@router.get("/{record_id}/edit")
async def edit_view(record_id: RecordId, db: AsyncSession = Depends(get_db)):
    service = UserFormService(db)
    return _render(
        "edit", record_id=record_id, form=await _existing_user_form(service, record_id)
    )


@router.post("/{record_id}/edit")
async def edit(record_id: RecordId, request: Request, db: AsyncSession = Depends(get_db)):
    form_data = await _load_form(request)
    service = UserFormService(db)
    try:
        await service.update_user(record_id, UserForm.model_validate(form_data))
    except ValidationError as exc:
        return _redisplay(
            "edit", form_data, format_validation_errors(exc.errors()), record_id
        )
    except UserNotFoundError as exc:
        return _redisplay("edit", form_data, str(exc), record_id)
    except SQLAlchemyError:
        return _redisplay("edit", form_data, f"Failed to update user {record_id}", record_id)
    return _redirect_to_index(request)


@router.get("/{record_id}/delete")
async def delete_view(record_id: RecordId, db: AsyncSession = Depends(get_db)):
    service = UserFormService(db)
    return _render(
        "delete", record_id=record_id, form=await _existing_user_form(service, record_id)
    )


@router.post("/{record_id}/delete")
async def delete(record_id: RecordId, request: Request, db: AsyncSession = Depends(get_db)):
    form_data = await _load_form(request)
    service = UserFormService(db)
    try:
        await service.delete_user(record_id)
    except UserNotFoundError as exc:
        return _redisplay("delete", form_data, str(exc), record_id)
    except SQLAlchemyError:
        return _redisplay("delete", form_data, f"Failed to delete user {record_id}", record_id)
    return _redirect_to_index(request)
