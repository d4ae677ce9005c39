"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.accounts.presentation.http.controllers.auth.confirm_email import (
    router as confirm_email_router,
)
from apps.accounts.presentation.http.controllers.auth.logout import router as logout_router
from apps.accounts.presentation.http.controllers.auth.me import router as me_router
from apps.accounts.presentation.http.controllers.auth.password import router as password_router
from apps.accounts.presentation.http.controllers.auth.refresh import router as refresh_router
from apps.accounts.presentation.http.controllers.auth.sign_in import router as sign_in_router
from apps.accounts.presentation.http.controllers.auth.sign_up import router as sign_up_router

router = APIRouter()

router.include_router(sign_up_router)
router.include_router(sign_in_router)
router.include_router(refresh_router)
router.include_router(logout_router)
router.include_router(confirm_email_router)
router.include_router(password_router)
router.include_router(me_router)
