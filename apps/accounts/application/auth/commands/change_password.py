"""ChangePassword Command.

인증된 사용자의 비밀번호를 바꾸고 새 버전으로 세션을 다시 발급합니다.
기존 리프레시 토큰은 버전 불일치로 모두 무효가 됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.auth.dto import AuthResult
from apps.accounts.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import ChangePasswordRequest
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)


class ChangePasswordInteractor:
    """비밀번호 변경 Interactor (지휘자).

    Workflow:
        1. 새 비밀번호 확인 값 일치 (PasswordPolicy)
        2. 사용자 조회 및 현재 비밀번호 확인 (UsersQueryGateway, PasswordPolicy)
        3. 현재/직전 비밀번호 재사용 차단 (PasswordPolicy)
        4. 비밀번호 교체, 버전 조건부 저장, 커밋
        5. 새 tokenId로 ACCESS/REFRESH 발급 (TokenService)
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

    async def execute(self, request: "ChangePasswordRequest") -> AuthResult:
        """비밀번호를 변경합니다.

        Raises:
            PasswordMismatchError: 새 비밀번호 확인 불일치
            UserNotFoundError: 삭제된 계정
            InvalidPasswordError: 현재 비밀번호 불일치 또는 현재와 같은 새 비밀번호
            PasswordReuseError: 재사용 제한 기간 내 직전 비밀번호
            StaleCredentialsError: 동시 변경으로 버전이 바뀜
        """
        # 1. 저장소 접근 전에 확인
        self._password_policy.confirm_passwords_match(request.password1, request.password2)

        # 2. 현재 비밀번호
        user = await self._users_query_gateway.get_by_id(request.user_id)
        if user is None:
            raise UserNotFoundError(str(request.user_id))
        await self._password_policy.verify_current_password(user, request.password)

        # 3. 재사용 차단
        await self._password_policy.ensure_can_use(user, request.password1, check_current=True)

        # 4. 교체 및 저장
        expected_version = user.version
        await self._password_policy.record_password_change(user, request.password1)
        await self._users_command_gateway.update(user, expected_version=expected_version)
        await self._transaction_manager.commit()

        # 5. 새 세션
        tokens = self._token_service.issue_auth_pair(user, audience=request.origin)
        logger.info(
            "Password changed",
            extra={"user_id": str(user.id_), "version": user.version},
        )
        return AuthResult(user=user, tokens=tokens)
