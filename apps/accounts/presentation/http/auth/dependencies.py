"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from apps.accounts.application.token.ports import TokenCodec
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import AuthenticationError, InvalidTokenError
from apps.accounts.domain.value_objects.user_id import UserId
from apps.accounts.setup.config import get_settings
from apps.accounts.setup.dependencies import get_token_codec

# 헤더 누락/형식 오류는 AuthenticationError (401)
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    codec: TokenCodec = Depends(get_token_codec),
) -> UserId:
    """ACCESS 토큰 주체 ID.

    Raises:
        AuthenticationError: 토큰 없음
        InvalidTokenError: 유효하지 않은 토큰
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")
    payload = codec.verify(TokenType.ACCESS, credentials.credentials)
    return payload.user_id


def get_refresh_token(request: Request) -> str:
    """쿠키에서 리프레시 토큰 추출.

    Raises:
        InvalidTokenError: 쿠키 없음
    """
    token = request.cookies.get(get_settings().refresh_cookie_name)
    if not token:
        raise InvalidTokenError("Refresh cookie missing")
    return token


def get_origin(origin: Optional[str] = Header(None, alias="Origin")) -> Optional[str]:
    """요청 origin (토큰 aud)."""
    return origin
