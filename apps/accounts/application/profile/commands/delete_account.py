"""DeleteAccount Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.profile.dto import DeleteAccountRequest
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)


class DeleteAccountInteractor:
    """계정 삭제 Interactor (지휘자).

    현재 비밀번호를 확인한 뒤 사용자를 삭제합니다.
    """

    def __init__(
        self,
        password_policy: "PasswordPolicy",
        users_query_gateway: "UsersQueryGateway",
        users_command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._password_policy = password_policy
        self._users_query_gateway = users_query_gateway
        self._users_command_gateway = users_command_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: "DeleteAccountRequest") -> None:
        """
        Raises:
            UserNotFoundError: 사용자 없음
            InvalidPasswordError: 현재 비밀번호 불일치
        """
        user = await self._users_query_gateway.get_by_id(request.user_id)
        if user is None:
            raise UserNotFoundError(str(request.user_id))
        await self._password_policy.verify_current_password(user, request.password)

        await self._users_command_gateway.delete(user.id_)
        await self._transaction_manager.commit()

        logger.info("Account deleted", extra={"user_id": str(user.id_)})
