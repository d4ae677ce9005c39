"""ConfirmEmail Command.

인증 메일 링크의 CONFIRMATION 토큰으로 계정을 인증하고 바로 로그인시킵니다.

Architecture:
    - UseCase(지휘자): ConfirmEmailInteractor
    - Services(연주자): TokenService, PasswordPolicy
    - Ports(인프라): UsersQueryGateway, UsersCommandGateway, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.auth.dto import AuthResult
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import StaleCredentialsError
from apps.accounts.domain.exceptions.validation import EmailAlreadyConfirmedError

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import ConfirmEmailRequest
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)


class ConfirmEmailInteractor:
    """이메일 인증 Interactor (지휘자).

    Workflow:
        1. CONFIRMATION 토큰 검증 (TokenService)
        2. (id, version)으로 사용자 조회 (UsersQueryGateway)
        3. 인증 처리 및 버전 증가 (PasswordPolicy)
        4. 버전 조건부 저장 후 커밋 (UsersCommandGateway, TransactionManager)
        5. 새 버전으로 ACCESS/REFRESH 발급 (TokenService)
    """

    def __init__(
        self,
        # Services (연주자)
        token_service: "TokenService",
        password_policy: "PasswordPolicy",
        # Ports (인프라)
        users_query_gateway: "UsersQueryGateway",
        users_command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        # Services
        self._token_service = token_service
        self._password_policy = password_policy
        # Ports
        self._users_query_gateway = users_query_gateway
        self._users_command_gateway = users_command_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: "ConfirmEmailRequest") -> AuthResult:
        """이메일을 인증합니다.

        Raises:
            InvalidTokenError: 유효하지 않거나 만료된 토큰
            StaleCredentialsError: 이미 사용했거나 자격 증명이 바뀐 토큰
            EmailAlreadyConfirmedError: 이미 인증된 계정
        """
        # 1. 검증
        payload = self._token_service.decode_and_validate(
            request.confirmation_token, expected_type=TokenType.CONFIRMATION
        )

        # 2. 버전 확인
        user = await self._users_query_gateway.get_by_credentials(
            payload.user_id, payload.version or 0
        )
        if user is None:
            raise StaleCredentialsError()
        if user.confirmed:
            raise EmailAlreadyConfirmedError()

        # 3. 인증 + 버전 증가 (토큰 1회용)
        expected_version = user.version
        user.confirm()
        user.credentials = self._password_policy.bump_version(user.credentials)

        # 4. 저장
        await self._users_command_gateway.update(user, expected_version=expected_version)
        await self._transaction_manager.commit()

        # 5. 로그인
        tokens = self._token_service.issue_auth_pair(user, audience=request.origin)
        logger.info("Email confirmed", extra={"user_id": str(user.id_)})
        return AuthResult(user=user, tokens=tokens)
