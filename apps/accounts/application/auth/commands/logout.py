"""Logout Command.

리프레시 토큰 계보를 블랙리스트에 등록합니다. 여러 번 호출해도 성공합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.common.dto import Message
from apps.accounts.domain.enums.token_type import TokenType

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import LogoutRequest
    from apps.accounts.application.token.services import TokenService

logger = logging.getLogger(__name__)

LOGOUT_MESSAGE = "Logout successful"


class LogoutInteractor:
    """로그아웃 Interactor (지휘자).

    Workflow:
        1. Refresh 토큰 검증 (TokenService)
        2. 남은 수명만큼 블랙리스트 등록 (TokenService)
    """

    def __init__(self, token_service: "TokenService") -> None:
        self._token_service = token_service

    async def execute(self, request: "LogoutRequest") -> Message:
        """로그아웃합니다.

        Raises:
            InvalidTokenError: 유효하지 않거나 만료된 토큰
        """
        payload = self._token_service.decode_and_validate(
            request.refresh_token, expected_type=TokenType.REFRESH
        )
        await self._token_service.blacklist(payload)

        logger.info(
            "User logged out",
            extra={"user_id": str(payload.user_id), "token_id": payload.token_id},
        )
        return Message(message=LOGOUT_MESSAGE)
