"""Refresh Controller.

토큰 갱신 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from apps.accounts.application.auth.commands import RefreshTokensInteractor
from apps.accounts.application.auth.dto import RefreshTokensRequest
from apps.accounts.presentation.http.auth.cookie_params import set_refresh_cookie
from apps.accounts.presentation.http.auth.dependencies import get_origin, get_refresh_token
from apps.accounts.presentation.http.mappers import to_auth_response
from apps.accounts.presentation.http.schemas import AuthResponse
from apps.accounts.setup.dependencies import get_refresh_tokens_interactor

router = APIRouter()


@router.post("/refresh-access", response_model=AuthResponse, summary="토큰 갱신")
async def refresh(
    response: Response,
    refresh_token: str = Depends(get_refresh_token),
    origin: Optional[str] = Depends(get_origin),
    interactor: RefreshTokensInteractor = Depends(get_refresh_tokens_interactor),
) -> AuthResponse:
    """리프레시 쿠키로 새 토큰 쌍을 발급합니다. tokenId는 유지됩니다."""
    result = await interactor.execute(
        RefreshTokensRequest(refresh_token=refresh_token, origin=origin)
    )
    set_refresh_cookie(
        response,
        refresh_token=result.tokens.refresh_token,
        expires_at=result.tokens.refresh_expires_at,
    )
    return to_auth_response(result)
