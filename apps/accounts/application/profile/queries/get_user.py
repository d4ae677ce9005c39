"""GetUser Queries.

공개 프로필 조회와 현재 사용자 조회입니다.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from apps.accounts.application.users.services import is_valid_username
from apps.accounts.domain.exceptions.user import UserNotFoundError
from apps.accounts.domain.exceptions.validation import InvalidIdentifierError
from apps.accounts.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from apps.accounts.application.users.ports import UsersQueryGateway
    from apps.accounts.domain.entities.user import User


def _parse_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


class GetUserQuery:
    """ID 또는 사용자명으로 공개 프로필 조회."""

    def __init__(self, users_query_gateway: "UsersQueryGateway") -> None:
        self._users_query_gateway = users_query_gateway

    async def execute(self, id_or_username: str) -> "User":
        """
        Raises:
            InvalidIdentifierError: UUID도 사용자명도 아닌 값
            UserNotFoundError: 사용자 없음
        """
        parsed = _parse_uuid(id_or_username)
        if parsed is not None:
            user = await self._users_query_gateway.get_by_id(UserId(value=parsed))
        else:
            username = id_or_username.lower()
            if not is_valid_username(username):
                raise InvalidIdentifierError()
            user = await self._users_query_gateway.get_by_username(username)

        if user is None:
            raise UserNotFoundError(id_or_username)
        return user


class GetCurrentUserQuery:
    """ACCESS 토큰 주체 조회."""

    def __init__(self, users_query_gateway: "UsersQueryGateway") -> None:
        self._users_query_gateway = users_query_gateway

    async def execute(self, user_id: UserId) -> "User":
        user = await self._users_query_gateway.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user
