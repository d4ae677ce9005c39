"""API v1 Router."""

from fastapi import APIRouter

from apps.accounts.presentation.http.controllers.auth.router import router as auth_router
from apps.accounts.presentation.http.controllers.users.router import router as users_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["auth"])
router.include_router(users_router, prefix="/users", tags=["users"])
