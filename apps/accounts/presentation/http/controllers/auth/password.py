"""Password Controllers.

비밀번호 찾기, 재설정, 변경 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from apps.accounts.application.auth.commands import (
    ChangePasswordInteractor,
    ForgotPasswordInteractor,
    ResetPasswordInteractor,
)
from apps.accounts.application.auth.dto import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)
from apps.accounts.domain.value_objects.user_id import UserId
from apps.accounts.presentation.http.auth.cookie_params import set_refresh_cookie
from apps.accounts.presentation.http.auth.dependencies import get_current_user_id, get_origin
from apps.accounts.presentation.http.mappers import to_auth_response, to_message_response
from apps.accounts.presentation.http.schemas import (
    AuthResponse,
    ChangePasswordBody,
    EmailBody,
    MessageResponse,
    ResetPasswordBody,
)
from apps.accounts.setup.dependencies import (
    get_change_password_interactor,
    get_forgot_password_interactor,
    get_reset_password_interactor,
)

router = APIRouter()


@router.post("/forgot-password", response_model=MessageResponse, summary="비밀번호 찾기")
async def forgot_password(
    body: EmailBody,
    origin: Optional[str] = Depends(get_origin),
    interactor: ForgotPasswordInteractor = Depends(get_forgot_password_interactor),
) -> MessageResponse:
    """가입 여부와 관계없이 같은 메시지를 반환합니다."""
    result = await interactor.execute(ForgotPasswordRequest(email=body.email, origin=origin))
    return to_message_response(result)


@router.patch("/reset-password", response_model=MessageResponse, summary="비밀번호 재설정")
async def reset_password(
    body: ResetPasswordBody,
    interactor: ResetPasswordInteractor = Depends(get_reset_password_interactor),
) -> MessageResponse:
    result = await interactor.execute(
        ResetPasswordRequest(
            reset_token=body.reset_token,
            password1=body.password1,
            password2=body.password2,
        )
    )
    return to_message_response(result)


@router.patch("/update-password", response_model=AuthResponse, summary="비밀번호 변경")
async def update_password(
    body: ChangePasswordBody,
    response: Response,
    user_id: UserId = Depends(get_current_user_id),
    origin: Optional[str] = Depends(get_origin),
    interactor: ChangePasswordInteractor = Depends(get_change_password_interactor),
) -> AuthResponse:
    """비밀번호를 변경하고 새 세션을 발급합니다. 기존 세션은 모두 무효가 됩니다."""
    result = await interactor.execute(
        ChangePasswordRequest(
            user_id=user_id,
            password=body.password,
            password1=body.password1,
            password2=body.password2,
            origin=origin,
        )
    )
    set_refresh_cookie(
        response,
        refresh_token=result.tokens.refresh_token,
        expires_at=result.tokens.refresh_expires_at,
    )
    return to_auth_response(result)
