"""UsersQueryGateway Port.

사용자 읽기 작업을 위한 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.accounts.domain.entities.user import User
from apps.accounts.domain.value_objects.user_id import UserId


class UsersQueryGateway(Protocol):
    """사용자 Query Gateway (읽기 작업).

    조회 실패는 예외가 아니라 None으로 알립니다.

    구현체:
        - SqlaUsersQueryGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def get_by_id(self, user_id: UserId) -> User | None:
        """ID로 사용자 조회."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """정규화된 이메일로 사용자 조회."""
        ...

    async def get_by_username(self, username: str) -> User | None:
        """사용자명으로 사용자 조회."""
        ...

    async def get_by_credentials(self, user_id: UserId, version: int) -> User | None:
        """ID와 자격 증명 버전이 모두 일치하는 사용자 조회.

        Args:
            user_id: 사용자 ID
            version: 토큰에 포함된 자격 증명 버전

        Returns:
            버전이 현재 값과 같으면 사용자, 아니면 None
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """이메일 사용 여부."""
        ...

    async def exists_by_username(self, username: str) -> bool:
        """사용자명 사용 여부."""
        ...

    async def count_usernames_like(self, prefix: str) -> int:
        """prefix로 시작하는 사용자명 개수."""
        ...
