"""UpdateProfile Command.

이름과 사용자명 변경입니다. 자격 증명 버전은 바뀌지 않지만,
읽은 시점의 버전으로 보호된 갱신을 사용합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.users.services import format_name, is_valid_username
from apps.accounts.domain.exceptions.user import UsernameAlreadyInUseError, UserNotFoundError
from apps.accounts.domain.exceptions.validation import (
    InvalidIdentifierError,
    NoChangesProvidedError,
    ValidationError,
)

if TYPE_CHECKING:
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.profile.dto import UpdateProfileRequest
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.domain.entities.user import User

logger = logging.getLogger(__name__)


class UpdateProfileInteractor:
    """프로필 변경 Interactor (지휘자).

    Workflow:
        1. 사용자 조회 (UsersQueryGateway)
        2. 이름 정리 후 변경 여부 확인
        3. 사용자명 형식/변경 여부/중복 확인
        4. 저장 후 커밋 (UsersCommandGateway, TransactionManager)
    """

    def __init__(
        self,
        users_query_gateway: "UsersQueryGateway",
        users_command_gateway: "UsersCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._users_query_gateway = users_query_gateway
        self._users_command_gateway = users_command_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: "UpdateProfileRequest") -> "User":
        """
        Raises:
            NoChangesProvidedError: 이름/사용자명 모두 없음
            ValidationError: 현재 값과 동일
            InvalidIdentifierError: 사용자명 형식 오류
            UsernameAlreadyInUseError: 사용 중인 사용자명
            StaleCredentialsError: 조회 후 자격 증명이 변경됨
        """
        if request.name is None and request.username is None:
            raise NoChangesProvidedError()

        user = await self._users_query_gateway.get_by_id(request.user_id)
        if user is None:
            raise UserNotFoundError(str(request.user_id))

        if request.name is not None:
            name = format_name(request.name)
            if name == user.name:
                raise ValidationError("Name must be different")
            user.name = name

        if request.username is not None:
            username = request.username.strip().lower()
            if not is_valid_username(username):
                raise InvalidIdentifierError()
            if username == user.username:
                raise ValidationError("Username should be different")
            if await self._users_query_gateway.exists_by_username(username):
                raise UsernameAlreadyInUseError()
            user.username = username

        user.touch()
        await self._users_command_gateway.update(user, expected_version=user.version)
        await self._transaction_manager.commit()

        logger.info("Profile updated", extra={"user_id": str(user.id_)})
        return user
