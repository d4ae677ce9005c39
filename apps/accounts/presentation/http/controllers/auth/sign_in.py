"""SignIn Controller."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from apps.accounts.application.auth.commands import SignInInteractor
from apps.accounts.application.auth.dto import SignInRequest
from apps.accounts.presentation.http.auth.cookie_params import set_refresh_cookie
from apps.accounts.presentation.http.auth.dependencies import get_origin
from apps.accounts.presentation.http.mappers import to_auth_response
from apps.accounts.presentation.http.schemas import AuthResponse, SignInBody
from apps.accounts.setup.dependencies import get_sign_in_interactor

router = APIRouter()


@router.post("/sign-in", response_model=AuthResponse, summary="로그인")
async def sign_in(
    body: SignInBody,
    response: Response,
    origin: Optional[str] = Depends(get_origin),
    interactor: SignInInteractor = Depends(get_sign_in_interactor),
) -> AuthResponse:
    """이메일 또는 사용자명으로 로그인합니다.

    액세스 토큰은 본문, 리프레시 토큰은 httponly 쿠키로 전달됩니다.
    """
    result = await interactor.execute(
        SignInRequest(
            email_or_username=body.email_or_username,
            password=body.password,
            origin=origin,
        )
    )
    set_refresh_cookie(
        response,
        refresh_token=result.tokens.refresh_token,
        expires_at=result.tokens.refresh_expires_at,
    )
    return to_auth_response(result)
