"""API routes for user queries and bulk creation."""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db
from app.schemas import BulkCreateResponse, UserCreate, UserResponse, UserSummary
from app.services import UserQueryService, build_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/active", response_model=list[UserSummary])
async def get_active_users(db: AsyncSession = Depends(get_db)):
    service = UserQueryService(db)
    return await service.list_active_users()


@router.get("/active/all", response_model=list[UserResponse])
async def get_all_active_users(db: AsyncSession = Depends(get_db)):
    service = UserQueryService(db)
    return await service.list_active_users_alt()


@router.get("/active/male/today", response_model=list[UserResponse])
async def get_active_male_users_registered_today(db: AsyncSession = Depends(get_db)):
    service = UserQueryService(db)
    return await service.find_active_males_registered_today()


@router.get("/by-user-id/{user_id}", response_model=Optional[UserResponse])
async def get_user_by_user_id(user_id: int, db: AsyncSession = Depends(get_db)):
    service = UserQueryService(db)
    return await service.find_user_by_external_id(user_id)


@router.post(
    "/bulk", response_model=BulkCreateResponse, status_code=status.HTTP_201_CREATED
)
async def create_users(users_in: list[UserCreate], db: AsyncSession = Depends(get_db)):
    service = UserQueryService(db)
    created = await service.create_users([build_user(user_in) for user_in in users_in])
    return BulkCreateResponse(created=created)
