"""Version 1 API routes for the user query service."""

from fastapi import APIRouter

from .user_form_routes import router as user_form_router
from .user_routes import router as user_router

router = APIRouter()
router.include_router(user_router)
router.include_router(user_form_router)

__all__ = ["router", "user_form_router", "user_router"]
