"""Logout Controller.

로그아웃 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Response

from apps.accounts.application.auth.commands import LogoutInteractor
from apps.accounts.application.auth.dto import LogoutRequest
from apps.accounts.presentation.http.auth.cookie_params import clear_refresh_cookie
from apps.accounts.presentation.http.auth.dependencies import get_refresh_token
from apps.accounts.presentation.http.mappers import to_message_response
from apps.accounts.presentation.http.schemas import MessageResponse
from apps.accounts.setup.dependencies import get_logout_interactor

router = APIRouter()


@router.post("/logout", response_model=MessageResponse, summary="로그아웃")
async def logout(
    response: Response,
    refresh_token: str = Depends(get_refresh_token),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
) -> MessageResponse:
    """로그아웃을 처리합니다.

    1. 리프레시 토큰 계보 블랙리스트 등록
    2. 쿠키 삭제
    """
    result = await interactor.execute(LogoutRequest(refresh_token=refresh_token))
    clear_refresh_cookie(response)
    return to_message_response(result)
