"""ResetPassword Command.

RESET_PASSWORD 토큰으로 비밀번호를 재설정합니다.

Architecture:
    - UseCase(지휘자): ResetPasswordInteractor
    - Services(연주자): PasswordPolicy, TokenService
    - Ports(인프라): UsersQueryGateway, UsersCommandGateway, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.common.dto import Message
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import StaleCredentialsError

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import ResetPasswordRequest
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)

RESET_PASSWORD_MESSAGE = "Password reset successful"


class ResetPasswordInteractor:
    """비밀번호 재설정 Interactor (지휘자).

    Workflow:
        1. 비밀번호 확인 값 일치 (PasswordPolicy)
        2. RESET_PASSWORD 토큰 검증 (TokenService)
        3. (id, version)으로 사용자 조회 (UsersQueryGateway)
        4. 재사용 제한 확인 후 비밀번호 교체 (PasswordPolicy)
        5. 버전 조건부 저장 후 커밋 (UsersCommandGateway, TransactionManager)
    """

    def __init__(
        self,
        # Services (연주자)
        password_policy: "PasswordPolicy",
        token_service: "TokenService",
        # Ports (인프라)
        users_query_gateway: "UsersQueryGateway",
        users_command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        # Services
        self._password_policy = password_policy
        self._token_service = token_service
        # Ports
        self._users_query_gateway = users_query_gateway
        self._users_command_gateway = users_command_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: "ResetPasswordRequest") -> Message:
        """비밀번호를 재설정합니다.

        Raises:
            PasswordMismatchError: 비밀번호 확인 불일치
            InvalidTokenError: 유효하지 않거나 만료된 토큰
            StaleCredentialsError: 이미 사용했거나 자격 증명이 바뀐 토큰
            PasswordReuseError: 재사용 제한 기간 내 직전 비밀번호
        """
        # 1. 토큰 검증 전에 확인
        self._password_policy.confirm_passwords_match(request.password1, request.password2)

        # 2. 검증
        payload = self._token_service.decode_and_validate(
            request.reset_token, expected_type=TokenType.RESET_PASSWORD
        )

        # 3. 버전 확인
        user = await self._users_query_gateway.get_by_credentials(
            payload.user_id, payload.version or 0
        )
        if user is None:
            raise StaleCredentialsError()

        # 4. 비밀번호 교체
        expected_version = user.version
        await self._password_policy.ensure_can_use(user, request.password1, check_current=False)
        await self._password_policy.record_password_change(user, request.password1)

        # 5. 저장
        await self._users_command_gateway.update(user, expected_version=expected_version)
        await self._transaction_manager.commit()

        logger.info(
            "Password reset",
            extra={"user_id": str(user.id_), "version": user.version},
        )
        return Message(message=RESET_PASSWORD_MESSAGE)
