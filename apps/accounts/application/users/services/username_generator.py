"""UsernameGenerator - 이름 기반 고유 사용자명 생성."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.accounts.application.users.services.naming import point_slug

if TYPE_CHECKING:
    from apps.accounts.application.users.ports import UsersQueryGateway

FALLBACK_SLUG = "user"


class UsernameGenerator:
    """이름을 slug로 바꾸고 중복이면 개수를 붙입니다.

    "John Doe" -> "john.doe", 이미 있으면 "john.doe1"
    """

    def __init__(self, users_query_gateway: "UsersQueryGateway") -> None:
        self._users = users_query_gateway

    async def generate(self, name: str) -> str:
        slug = point_slug(name) or FALLBACK_SLUG
        count = await self._users.count_usernames_like(slug)
        if count == 0:
            return slug

        # 같은 접두사의 다른 사용자명이 있으면 번호가 이미 쓰였을 수 있음
        candidate = f"{slug}{count}"
        while await self._users.exists_by_username(candidate):
            count += 1
            candidate = f"{slug}{count}"
        return candidate
