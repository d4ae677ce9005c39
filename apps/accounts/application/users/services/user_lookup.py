"""UserLookup - 이메일/사용자명 식별자 해석."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.accounts.application.users.services.naming import is_valid_username
from apps.accounts.domain.exceptions.validation import InvalidIdentifierError
from apps.accounts.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.accounts.application.users.ports import UsersQueryGateway
    from apps.accounts.domain.entities.user import User


class UserLookup:
    """로그인 식별자로 사용자를 찾습니다.

    ``@``가 있으면 이메일, 없으면 사용자명으로 취급합니다.
    """

    def __init__(self, users_query_gateway: "UsersQueryGateway") -> None:
        self._users = users_query_gateway

    async def by_email_or_username(self, identifier: str) -> "User | None":
        """식별자로 사용자 조회.

        Raises:
            InvalidEmailError: 이메일 형식 오류
            InvalidIdentifierError: 사용자명 형식 오류
        """
        if "@" in identifier:
            email = Email.normalize(identifier)
            return await self._users.get_by_email(email.value)

        username = identifier.lower()
        if not is_valid_username(username):
            raise InvalidIdentifierError()
        return await self._users.get_by_username(username)
