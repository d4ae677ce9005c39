"""Cookie Parameters.

리프레시 토큰 쿠키 설정을 관리합니다. 액세스 토큰은 응답 본문으로 전달됩니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from apps.accounts.setup.config import get_settings

if TYPE_CHECKING:
    from fastapi import Response

COOKIE_SAMESITE = "lax"


def get_cookie_params() -> dict:
    """쿠키 공통 파라미터."""
    settings = get_settings()
    params = {
        "path": settings.cookie_path,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": COOKIE_SAMESITE,
    }
    if settings.cookie_domain:
        params["domain"] = settings.cookie_domain
    return params


def set_refresh_cookie(response: "Response", *, refresh_token: str, expires_at: int) -> None:
    """리프레시 토큰 쿠키 설정."""
    max_age = max(expires_at - int(time.time()), 1)
    response.set_cookie(
        key=get_settings().refresh_cookie_name,
        value=refresh_token,
        max_age=max_age,
        **get_cookie_params(),
    )


def clear_refresh_cookie(response: "Response") -> None:
    """리프레시 토큰 쿠키 삭제."""
    params = get_cookie_params()
    # httponly는 delete_cookie에서 지원 안 함
    del params["httponly"]
    response.delete_cookie(get_settings().refresh_cookie_name, **params)
