"""ForgotPassword Command.

비밀번호 재설정 메일을 보냅니다. 가입 여부와 관계없이 같은 응답을 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.common.dto import Message
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import ForgotPasswordRequest
    from apps.accounts.application.notifications.ports import Mailer
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersQueryGateway

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_MESSAGE = "Reset password email sent."


class ForgotPasswordInteractor:
    """비밀번호 찾기 Interactor (지휘자).

    Workflow:
        1. 이메일로 사용자 조회 (UsersQueryGateway)
        2. 있으면 RESET_PASSWORD 토큰 발급 후 메일 발송 예약 (TokenService, Mailer)
        3. 항상 같은 메시지 반환
    """

    def __init__(
        self,
        # Services (연주자)
        token_service: "TokenService",
        # Ports (인프라)
        users_query_gateway: "UsersQueryGateway",
        mailer: "Mailer",
    ) -> None:
        # Services
        self._token_service = token_service
        # Ports
        self._users_query_gateway = users_query_gateway
        self._mailer = mailer

    async def execute(self, request: "ForgotPasswordRequest") -> Message:
        email = Email.normalize(request.email)
        user = await self._users_query_gateway.get_by_email(email.value)

        if user is None:
            logger.info("Reset requested for unknown email", extra={"email": email.masked})
        else:
            token = self._token_service.issue_email_token(
                user, TokenType.RESET_PASSWORD, audience=request.origin
            )
            self._mailer.send_reset_password_email(user, token)
            logger.info("Reset password email scheduled", extra={"user_id": str(user.id_)})

        return Message(message=FORGOT_PASSWORD_MESSAGE)
