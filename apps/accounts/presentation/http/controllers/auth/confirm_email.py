"""ConfirmEmail Controller."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from apps.accounts.application.auth.commands import ConfirmEmailInteractor
from apps.accounts.application.auth.dto import ConfirmEmailRequest
from apps.accounts.presentation.http.auth.cookie_params import set_refresh_cookie
from apps.accounts.presentation.http.auth.dependencies import get_origin
from apps.accounts.presentation.http.mappers import to_auth_response
from apps.accounts.presentation.http.schemas import AuthResponse, ConfirmEmailBody
from apps.accounts.setup.dependencies import get_confirm_email_interactor

router = APIRouter()


@router.post("/confirm-email", response_model=AuthResponse, summary="이메일 인증")
async def confirm_email(
    body: ConfirmEmailBody,
    response: Response,
    origin: Optional[str] = Depends(get_origin),
    interactor: ConfirmEmailInteractor = Depends(get_confirm_email_interactor),
) -> AuthResponse:
    """인증 토큰으로 계정을 인증하고 바로 로그인합니다."""
    result = await interactor.execute(
        ConfirmEmailRequest(confirmation_token=body.confirmation_token, origin=origin)
    )
    set_refresh_cookie(
        response,
        refresh_token=result.tokens.refresh_token,
        expires_at=result.tokens.refresh_expires_at,
    )
    return to_auth_response(result)
