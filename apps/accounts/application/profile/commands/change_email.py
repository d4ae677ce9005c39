"""ChangeEmail Command.

이메일 변경은 자격 증명 버전을 올려 기존 리프레시/인증/재설정 토큰을 모두 무효화합니다.
변경 후 새 버전으로 세션을 다시 발급합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.auth.dto import AuthResult
from apps.accounts.domain.exceptions.user import EmailAlreadyInUseError, UserNotFoundError
from apps.accounts.domain.exceptions.validation import ValidationError
from apps.accounts.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.profile.dto import ChangeEmailRequest
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)


class ChangeEmailInteractor:
    """이메일 변경 Interactor (지휘자).

    Workflow:
        1. 사용자 조회 및 현재 비밀번호 확인 (PasswordPolicy)
        2. 새 이메일 정규화, 변경 여부/중복 확인
        3. 버전 증가 후 버전 조건부 저장, 커밋
        4. 새 세션 발급 (TokenService)
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

    async def execute(self, request: "ChangeEmailRequest") -> AuthResult:
        """
        Raises:
            InvalidPasswordError: 현재 비밀번호 불일치
            InvalidEmailError: 이메일 형식 오류
            ValidationError: 현재 이메일과 동일
            EmailAlreadyInUseError: 사용 중인 이메일
            StaleCredentialsError: 동시 변경으로 버전이 바뀜
        """
        user = await self._users_query_gateway.get_by_id(request.user_id)
        if user is None:
            raise UserNotFoundError(str(request.user_id))
        await self._password_policy.verify_current_password(user, request.password)

        email = Email.normalize(request.email)
        if email.value == user.email:
            raise ValidationError("Email should be different")
        if await self._users_query_gateway.exists_by_email(email.value):
            raise EmailAlreadyInUseError()

        expected_version = user.version
        user.email = email.value
        user.credentials = self._password_policy.bump_version(user.credentials)
        user.touch()
        await self._users_command_gateway.update(user, expected_version=expected_version)
        await self._transaction_manager.commit()

        tokens = self._token_service.issue_auth_pair(user, audience=request.origin)
        logger.info(
            "Email changed",
            extra={"user_id": str(user.id_), "email": email.masked, "version": user.version},
        )
        return AuthResult(user=user, tokens=tokens)
